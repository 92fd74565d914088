def test_unmatched_route_is_empty_404(client):
    resp = client.get("/api/nonexistent")
    assert resp.status_code == 404
    assert resp.content == b""


def test_unsupported_method_is_empty_404(client):
    resp = client.patch("/api/candidate/1", json={"party_id": 1})
    assert resp.status_code == 404
    assert resp.content == b""


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_database_is_open_while_serving(client):
    assert client.app.state.db.is_open


def test_list_read_failure_is_server_error(client, run_sql):
    run_sql("DROP TABLE voters")

    resp = client.get("/api/voters")
    assert resp.status_code == 500
    assert "no such table" in resp.json()["error"]


def test_single_read_failure_is_client_error(client, run_sql):
    run_sql("DROP TABLE voters")

    resp = client.get("/api/voter/1")
    assert resp.status_code == 400
    assert "no such table" in resp.json()["error"]


def test_write_failures_are_client_errors(client, run_sql):
    run_sql("DROP TABLE candidates")

    resp = client.post(
        "/api/candidate",
        json={"first_name": "Ronald", "last_name": "Firbank", "industry_connected": 1},
    )
    assert resp.status_code == 400
    assert "no such table" in resp.json()["error"]

    resp = client.delete("/api/candidate/1")
    assert resp.status_code == 400
    assert "no such table" in resp.json()["error"]


def test_ids_beyond_sqlite_integer_range_are_client_errors(client):
    too_big = 2**70

    resp = client.get(f"/api/candidate/{too_big}")
    assert resp.status_code == 400
    assert "too large" in resp.json()["error"]

    resp = client.put("/api/candidate/1", json={"party_id": too_big})
    assert resp.status_code == 400
    assert "too large" in resp.json()["error"]

    resp = client.post("/api/vote", json={"voter_id": too_big, "candidate_id": 1})
    assert resp.status_code == 400
    assert "too large" in resp.json()["error"]
