from __future__ import annotations

ALICE = "alice@x.com"


def _post(client, **body):
    return client.post("/api/status", json=body)


def test_post_then_get_status(client):
    resp = _post(client, email=ALICE, date="2025-03-10", status="H", comment="wfh")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}

    data = client.get(f"/api/status/{ALICE}/2025-03-10").get_json()
    assert data["status"] == "H"
    assert data["comment"] == "wfh"
    assert data["email"] == ALICE
    assert data["created_at"]


def test_get_unset_status_returns_null(client):
    resp = client.get(f"/api/status/{ALICE}/2025-03-10")
    assert resp.status_code == 200
    assert resp.get_json() is None


def test_monthly_route_derives_month_from_any_date(client):
    _post(client, email=ALICE, date="2025-03-05", status="H")
    _post(client, email=ALICE, date="2025-03-31", status="O")
    _post(client, email=ALICE, date="2025-04-01", status="L")

    data = client.get("/api/status/monthly/2025-03-15T10:00:00.000Z").get_json()
    assert [r["date"] for r in data] == ["2025-03-05", "2025-03-31"]


def test_delete_is_a_no_op_when_absent(client):
    resp = client.delete(f"/api/status/{ALICE}/2025-03-10")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}


def test_delete_removes_record(client):
    _post(client, email=ALICE, date="2025-03-10", status="S")
    client.delete(f"/api/status/{ALICE}/2025-03-10")
    assert client.get(f"/api/status/{ALICE}/2025-03-10").get_json() is None


def test_count(client):
    _post(client, email=ALICE, date="2025-03-10", status="S")
    _post(client, email=ALICE, date="2025-03-11", status="S")
    assert client.get("/api/status/count").get_json() == {"count": 2}


def test_invalid_status_is_a_400_with_error_body(client):
    resp = _post(client, email=ALICE, date="2025-03-10", status="Z")
    assert resp.status_code == 400
    assert "Invalid status" in resp.get_json()["error"]


def test_unparseable_month_is_a_400(client):
    resp = client.get("/api/status/monthly/not-a-date")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_storage_failure_is_a_500(client, status_repo, monkeypatch):
    from src.wfh_tracker.wfh_tracker.core.exceptions import StoreUnavailableError

    def boom():
        raise StoreUnavailableError("connection refused")

    monkeypatch.setattr(status_repo, "count", boom)
    resp = client.get("/api/status/count")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "connection refused"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_post_accepts_status_label(client):
    resp = _post(client, email=ALICE, date="2025-03-10", status="Office")
    assert resp.status_code == 200
    assert client.get(f"/api/status/{ALICE}/2025-03-10").get_json()["status"] == "O"


def test_non_string_comment_is_a_400(client):
    resp = _post(client, email=ALICE, date="2025-03-10", status="H", comment=7)
    assert resp.status_code == 400
    assert client.get(f"/api/status/{ALICE}/2025-03-10").get_json() is None
