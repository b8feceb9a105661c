# employee-sheets/employee_sheets/core/config.py
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class SheetConfig(BaseModel):
    """Connection parameters for one spreadsheet tab. Never mutated after construction."""
    spreadsheet_id: str
    api_key: str | None = None
    access_token: str | None = None
    sheet_name: str = "Sheet1"
    base_url: str = "https://sheets.googleapis.com/v4/spreadsheets"
    timeout: float = 30.0

    class Config:
        frozen = True


class Settings(BaseSettings):
    GOOGLE_SHEET_ID: str = ""; GOOGLE_API_KEY: str = ""; GOOGLE_ACCESS_TOKEN: str = ""
    SHEET_NAME: str = "Sheet1"
    SHEETS_BASE_URL: str = "https://sheets.googleapis.com/v4/spreadsheets"
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    SERVICE_API_KEY: str = ""
    LOG_LEVEL: str = "INFO"

    def sheet_config(self) -> SheetConfig:
        return SheetConfig(
            spreadsheet_id=self.GOOGLE_SHEET_ID,
            api_key=self.GOOGLE_API_KEY or None,
            access_token=self.GOOGLE_ACCESS_TOKEN or None,
            sheet_name=self.SHEET_NAME,
            base_url=self.SHEETS_BASE_URL.rstrip("/"),
            timeout=self.REQUEST_TIMEOUT_SECONDS,
        )


settings = Settings()
