from datetime import date, datetime, timezone
from typing import Any, Optional

import requests


class EntryApiError(Exception):
    """Raised when the journal API answers with an error or cannot be reached."""

    def __init__(self, status_code: Optional[int], msg: str):
        super().__init__(f"{status_code}: {msg}" if status_code else msg)
        self.status_code = status_code
        self.msg = msg


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp; a trailing ``Z`` and naive values both mean UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def encode_entry(fields: dict[str, Any]) -> dict[str, Any]:
    """JSON-ready copy of ``fields``; dates and datetimes become ISO strings."""
    out = {}
    for key, value in fields.items():
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        out[key] = value
    return out


class EntryClient:
    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise EntryApiError(None, str(e)) from e
        if not r.ok:
            try:
                msg = r.json().get("msg") or r.reason
            except ValueError:
                msg = r.reason
            raise EntryApiError(r.status_code, msg)
        try:
            return r.json()
        except ValueError as e:
            raise EntryApiError(r.status_code, "Response was not JSON") from e

    def list_entries(self) -> list[dict]:
        return self._request("GET", "/get/")

    def get_entry(self, entry_id: int) -> dict:
        return self._request("GET", f"/get/{entry_id}")

    def create_entry(self, fields: dict[str, Any]) -> dict:
        return self._request("POST", "/create/", json=encode_entry(fields))

    def update_entry(self, entry_id: int, changes: dict[str, Any]) -> str:
        return self._request("PUT", f"/update/{entry_id}", json=encode_entry(changes))["msg"]

    def delete_entry(self, entry_id: int) -> str:
        return self._request("DELETE", f"/delete/{entry_id}")["msg"]
