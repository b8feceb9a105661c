from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from employee_sheets.core.config import SheetConfig
from employee_sheets.core.exceptions import SheetStoreError, TransportError
from employee_sheets.services.sheets_client import SheetsValuesClient

BASE = "https://sheets.googleapis.com/v4/spreadsheets/sheet-123/values"


def make_client(handler, **config):
    config.setdefault("spreadsheet_id", "sheet-123")
    return SheetsValuesClient(SheetConfig(**config), transport=httpx.MockTransport(handler))


def test_read_range_returns_values():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"range": "Sheet1!A1:H2", "values": [["Employee_ID"], ["E1"]]})

    client = make_client(handler, api_key="k-1")

    rows = asyncio.run(client.read_range("Sheet1"))

    assert rows == [["Employee_ID"], ["E1"]]
    assert seen[0].method == "GET"
    assert str(seen[0].url).startswith(f"{BASE}/Sheet1")
    assert seen[0].url.params["key"] == "k-1"


def test_read_empty_range():
    client = make_client(lambda request: httpx.Response(200, json={"range": "Sheet1!A1:Z1000"}))

    assert asyncio.run(client.read_range("Sheet1")) == []


def test_write_range_sends_raw_values():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"updatedCells": 8})

    client = make_client(handler, access_token="tok")

    result = asyncio.run(client.write_range("Sheet1!A2:H2", [["E1", "Ann", "", "", "logged-out", "", "0", "t"]]))

    request = seen[0]
    assert result == {"updatedCells": 8}
    assert request.method == "PUT"
    assert request.url.path.endswith("/values/Sheet1!A2:H2")
    assert request.url.params["valueInputOption"] == "RAW"
    assert "key" not in request.url.params
    assert request.headers["Authorization"] == "Bearer tok"
    body = json.loads(request.content)
    assert body["range"] == "Sheet1!A2:H2"
    assert body["values"] == [["E1", "Ann", "", "", "logged-out", "", "0", "t"]]


def test_clear_range_posts_to_clear_endpoint():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"clearedRange": "Sheet1!A3:H3"})

    client = make_client(handler)

    asyncio.run(client.clear_range("Sheet1!A3:H3"))

    assert seen[0].method == "POST"
    assert seen[0].url.path.endswith("/values/Sheet1!A3:H3:clear")


def test_quoted_sheet_names_are_encoded():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={})

    client = make_client(handler)

    asyncio.run(client.read_range("'Staff Status'!A1:H1"))

    assert "Staff%20Status" in seen[0].url.raw_path.decode()


def test_error_status_raises_transport_error():
    client = make_client(lambda request: httpx.Response(403, json={"error": {"message": "denied"}}))

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(client.write_range("Sheet1!A1:H1", [["x"]]))

    assert excinfo.value.status_code == 403
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_network_failure_raises_transport_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(client.read_range("Sheet1"))

    assert excinfo.value.status_code is None


def test_non_json_success_body_raises_transport_error():
    client = make_client(lambda request: httpx.Response(200, text="<html>proxy login</html>"))

    with pytest.raises(SheetStoreError) as excinfo:
        asyncio.run(client.read_range("Sheet1"))

    assert isinstance(excinfo.value, TransportError)
    assert excinfo.value.status_code == 200
