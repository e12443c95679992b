"""
Tests for history recording, listing, search and restore.
"""

from datetime import datetime, timedelta

from hypothesis import given, strategies as st, settings, HealthCheck

from postwoman.models.history import History
from postwoman.schemas.enums import BodyType, HTTPMethod
from postwoman.schemas.key_value import KeyValuePair
from postwoman.schemas.request import RequestConfig
from postwoman.schemas.response import HTTPResponse
from postwoman.services.history_service import build_history, restore_request, save_history


def add_entries(db, urls_and_methods, start=datetime(2024, 1, 1)):
    for offset, (url, method) in enumerate(urls_and_methods):
        db.add(History(
            timestamp=start + timedelta(minutes=offset),
            url=url,
            method=method,
            request_headers=[],
            status_code=200,
            was_successful=True,
        ))
    db.commit()


class TestBuildHistory:

    def test_snapshot_of_request_and_response(self):
        config = RequestConfig(
            url="https://api.example.com/users",
            method=HTTPMethod.POST,
            headers=[KeyValuePair(key="Accept", value="*/*", is_enabled=False)],
            body_type=BodyType.JSON,
            body_content="{}",
        )
        response = HTTPResponse(
            status_code=201,
            headers=[KeyValuePair(key="Content-Type", value="application/json")],
            body='{"id": 1}',
            response_time_ms=12.5,
            content_type="application/json",
        )

        entry = build_history(config, response, saved_request_id=7)

        assert entry.url == "https://api.example.com/users"
        assert entry.method == "POST"
        assert entry.request_headers[0]["key"] == "Accept"
        assert entry.request_headers[0]["is_enabled"] is False
        assert entry.request_body == "{}"
        assert entry.status_code == 201
        assert entry.response_headers[0]["value"] == "application/json"
        assert entry.response_body == '{"id": 1}'
        assert entry.response_time_ms == 12.5
        assert entry.response_size_bytes == 9
        assert entry.was_successful is True
        assert entry.error_message is None
        assert entry.saved_request_id == 7

    def test_empty_body_is_not_stored(self):
        entry = build_history(RequestConfig(url="https://x.test/"), HTTPResponse(status_code=204))
        assert entry.request_body is None
        assert entry.response_body is None
        assert entry.response_size_bytes is None

    def test_transport_failure(self):
        response = HTTPResponse.from_error(ConnectionError("Connection refused"))
        entry = build_history(RequestConfig(url="https://x.test/"), response)
        assert entry.status_code == 0
        assert entry.was_successful is False
        assert entry.error_message == "Error: Connection refused"

    def test_save_assigns_id(self, db_session):
        entry = save_history(db_session, RequestConfig(url="https://x.test/"), HTTPResponse(status_code=200))
        assert entry.id is not None
        assert db_session.query(History).count() == 1


class TestRestore:

    def test_restore_request_config(self):
        entry = History(
            url="https://api.example.com/users",
            method="PUT",
            request_headers=[{"id": "1", "key": "Accept", "value": "*/*", "is_enabled": True}],
            request_body="hello",
        )
        config = restore_request(entry)
        assert config.name == "Restored: https://api.example.com/users"
        assert config.method is HTTPMethod.PUT
        assert config.headers == [KeyValuePair(key="Accept", value="*/*")]
        assert config.body_type is BodyType.TEXT
        assert config.body_content == "hello"

    def test_restore_without_body(self):
        entry = History(url="https://x.test/", method="GET", request_headers=[])
        config = restore_request(entry)
        assert config.body_type is BodyType.NONE
        assert config.body_content == ""

    def test_restore_endpoint_creates_standalone_request(self, client, db_session):
        add_entries(db_session, [("https://api.example.com/a", "DELETE")])
        history_id = db_session.query(History).first().id

        response = client.post(f"/api/history/{history_id}/restore")
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Restored: https://api.example.com/a"
        assert data["method"] == "DELETE"
        assert data["folder_id"] is None
        assert client.get(f"/api/requests/{data['id']}").status_code == 200

    def test_restore_missing(self, client):
        assert client.post("/api/history/999/restore").status_code == 404


class TestHistoryApi:

    def test_newest_first(self, client, db_session):
        add_entries(db_session, [
            ("https://api.example.com/1", "GET"),
            ("https://api.example.com/2", "GET"),
            ("https://api.example.com/3", "GET"),
        ])
        data = client.get("/api/history").json()
        assert data["total"] == 3
        assert [item["url"] for item in data["items"]] == [
            "https://api.example.com/3",
            "https://api.example.com/2",
            "https://api.example.com/1",
        ]

    def test_pagination(self, client, db_session):
        add_entries(db_session, [(f"https://api.example.com/{i}", "GET") for i in range(5)])
        data = client.get("/api/history", params={"skip": 1, "limit": 2}).json()
        assert data["total"] == 5
        assert [item["url"] for item in data["items"]] == [
            "https://api.example.com/3",
            "https://api.example.com/2",
        ]

    def test_search_by_url_or_method(self, client, db_session):
        add_entries(db_session, [
            ("https://api.example.com/users", "GET"),
            ("https://api.example.com/orders", "POST"),
            ("https://other.example.com/USERS", "DELETE"),
        ])
        by_url = client.get("/api/history", params={"search": "users"}).json()
        assert by_url["total"] == 2

        by_method = client.get("/api/history", params={"search": "post"}).json()
        assert [item["url"] for item in by_method["items"]] == ["https://api.example.com/orders"]

    def test_delete_one_and_clear(self, client, db_session):
        add_entries(db_session, [("https://a.test/", "GET"), ("https://b.test/", "GET")])
        first_id = db_session.query(History).order_by(History.id).first().id

        assert client.delete(f"/api/history/{first_id}").status_code == 204
        assert client.get(f"/api/history/{first_id}").status_code == 404
        assert client.delete(f"/api/history/{first_id}").status_code == 404
        assert client.get("/api/history").json()["total"] == 1

        assert client.delete("/api/history").status_code == 204
        assert client.get("/api/history").json()["total"] == 0


@given(count=st.integers(min_value=1, max_value=8))
@settings(max_examples=10, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_history_is_newest_first(client, db_session, count):
    """
    *For any* number of executions, the history list is ordered by execution
    time, newest first.
    """
    client.delete("/api/history")
    add_entries(db_session, [(f"https://api.example.com/{i}", "GET") for i in range(count)])

    items = client.get("/api/history").json()["items"]
    timestamps = [item["timestamp"] for item in items]
    assert len(items) == count
    assert timestamps == sorted(timestamps, reverse=True)
