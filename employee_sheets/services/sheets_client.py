# employee-sheets/employee_sheets/services/sheets_client.py
import json
import logging
from typing import Any, Dict, List, Sequence
from urllib.parse import quote

import httpx

from employee_sheets.core.config import SheetConfig
from employee_sheets.core.exceptions import TransportError

logger = logging.getLogger(__name__)


class SheetsValuesClient:
    """
    Minimal async client for the spreadsheet values endpoints.

    The backend is treated as an opaque range store: read, overwrite and clear
    rectangular A1 ranges. A new AsyncClient is opened per call.
    """

    def __init__(self, config: SheetConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    def _url(self, range_spec: str, suffix: str = "") -> str:
        encoded = quote(range_spec, safe="!:'")
        return f"{self.config.base_url}/{self.config.spreadsheet_id}/values/{encoded}{suffix}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    def _params(self, **extra: str) -> Dict[str, str]:
        params = dict(extra)
        if self.config.api_key:
            params["key"] = self.config.api_key
        return params

    async def _request(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as client:
            try:
                response = await client.request(method, url, headers=self._headers(), **kwargs)
                response.raise_for_status()
                if not response.content:
                    return {}
                return response.json()
            except httpx.HTTPStatusError as http_err:
                status_code = http_err.response.status_code
                logger.error("Sheets API returned %s for %s %s: %s", status_code, method, url, http_err.response.text)
                raise TransportError(f"HTTP error! status: {status_code}", status_code=status_code) from http_err
            except httpx.RequestError as e:
                logger.error("Sheets API request %s %s failed: %s", method, url, e)
                raise TransportError(f"Request failed: {e}") from e
            except json.JSONDecodeError as e:
                logger.error("Sheets API sent a non-JSON body for %s %s: %s", method, url, response.text[:200])
                raise TransportError(f"Invalid JSON in response: {e}", status_code=response.status_code) from e

    async def read_range(self, range_spec: str) -> List[List[str]]:
        data = await self._request("GET", self._url(range_spec), params=self._params())
        return data.get("values") or []

    async def write_range(self, range_spec: str, rows: Sequence[Sequence[str]]) -> Dict[str, Any]:
        payload = {
            "range": range_spec,
            "majorDimension": "ROWS",
            "values": [list(row) for row in rows],
        }
        return await self._request(
            "PUT",
            self._url(range_spec),
            params=self._params(valueInputOption="RAW"),
            json=payload,
        )

    async def clear_range(self, range_spec: str) -> Dict[str, Any]:
        return await self._request("POST", self._url(range_spec, ":clear"), params=self._params())
