from datetime import date, datetime, timedelta, timezone

import pytest
import requests

from frontend.streamlit_app.api import EntryApiError, EntryClient, encode_entry, parse_timestamp


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(body={})
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_encode_entry_formats_dates():
    encoded = encode_entry({
        "title": "t",
        "created_at": datetime(2024, 1, 2, 3, 4),
        "scheduled_at": date(2024, 2, 1),
    })
    assert encoded == {
        "title": "t",
        "created_at": "2024-01-02T03:04:00",
        "scheduled_at": "2024-02-01",
    }


def test_create_posts_json():
    session = FakeSession(FakeResponse(body={"id": 1, "title": "t"}))
    client = EntryClient("http://api.test/", session=session, timeout=3)

    created = client.create_entry({"title": "t", "created_at": datetime(2024, 1, 1)})

    assert created == {"id": 1, "title": "t"}
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://api.test/create/")
    assert kwargs["json"] == {"title": "t", "created_at": "2024-01-01T00:00:00"}
    assert kwargs["timeout"] == 3


@pytest.mark.parametrize(
    "call, method, url",
    [
        (lambda c: c.list_entries(), "GET", "http://api.test/get/"),
        (lambda c: c.get_entry(4), "GET", "http://api.test/get/4"),
        (lambda c: c.delete_entry(4), "DELETE", "http://api.test/delete/4"),
    ],
)
def test_routes(call, method, url):
    session = FakeSession(FakeResponse(body={"msg": "ok"}))
    call(EntryClient("http://api.test", session=session))
    assert session.calls[0][:2] == (method, url)


def test_update_returns_confirmation():
    session = FakeSession(FakeResponse(body={"msg": "Updated successfully"}))
    client = EntryClient("http://api.test", session=session)
    assert client.update_entry(2, {"title": "x"}) == "Updated successfully"
    assert session.calls[0][:2] == ("PUT", "http://api.test/update/2")


def test_error_response_carries_server_message():
    session = FakeSession(FakeResponse(500, {"msg": "Error deleting entry"}, "Internal Server Error"))
    client = EntryClient("http://api.test", session=session)
    with pytest.raises(EntryApiError) as excinfo:
        client.delete_entry(9)
    assert excinfo.value.status_code == 500
    assert excinfo.value.msg == "Error deleting entry"


def test_error_response_without_json_uses_reason():
    session = FakeSession(FakeResponse(502, None, "Bad Gateway"))
    with pytest.raises(EntryApiError) as excinfo:
        EntryClient("http://api.test", session=session).list_entries()
    assert excinfo.value.msg == "Bad Gateway"


def test_transport_error_is_wrapped():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(EntryApiError) as excinfo:
        EntryClient("http://api.test", session=session).list_entries()
    assert excinfo.value.status_code is None
    assert "refused" in excinfo.value.msg


def test_success_without_json_body_is_an_api_error():
    session = FakeSession(FakeResponse(200, None))
    with pytest.raises(EntryApiError) as excinfo:
        EntryClient("http://api.test", session=session).list_entries()
    assert excinfo.value.status_code == 200


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-05-01T03:30:00Z", datetime(2024, 5, 1, 3, 30, tzinfo=timezone.utc)),
        ("2024-05-01T08:30:00+05:00", datetime(2024, 5, 1, 3, 30, tzinfo=timezone.utc)),
        ("2024-05-01T03:30:00", datetime(2024, 5, 1, 3, 30, tzinfo=timezone.utc)),
    ],
)
def test_parse_timestamp(value, expected):
    parsed = parse_timestamp(value)
    assert parsed == expected
    assert parsed.utcoffset() is not None


def test_parse_timestamp_keeps_offset():
    parsed = parse_timestamp("2024-05-01T08:30:00+05:00")
    assert parsed.utcoffset() == timedelta(hours=5)
