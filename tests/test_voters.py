def _register(client, first_name, last_name, email):
    resp = client.post(
        "/api/voter",
        json={"first_name": first_name, "last_name": last_name, "email": email},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["id"]


def test_register_and_get_voter(client):
    voter_id = _register(client, "James", "Fraser", "jf@goldenbough.edu")

    data = client.get(f"/api/voter/{voter_id}").json()["data"]
    assert data["id"] == voter_id
    assert data["first_name"] == "James"
    assert data["last_name"] == "Fraser"
    assert data["email"] == "jf@goldenbough.edu"
    assert data["created_at"]


def test_register_rejects_blank_email(client):
    resp = client.post("/api/voter", json={"first_name": "Jack", "last_name": "London", "email": " "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No email specified."}


def test_list_voters_ordered_by_last_name(client):
    _register(client, "Emil", "Zola", "ezola@paris.fr")
    _register(client, "Robert", "Bruce", "rbruce@scotland.net")
    _register(client, "Jack", "London", "jlondon@ualaska.edu")

    resp = client.get("/api/voters")
    assert resp.status_code == 200
    assert [row["last_name"] for row in resp.json()["data"]] == ["Bruce", "London", "Zola"]


def test_get_missing_voter_returns_null_data(client):
    resp = client.get("/api/voter/7")
    assert resp.status_code == 200
    assert resp.json()["data"] is None


def test_update_email(client):
    voter_id = _register(client, "Derek", "Jarman", "djarman@fml.co.uk")

    resp = client.put(f"/api/voter/{voter_id}", json={"email": "derek@fml.co.uk"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "success", "data": {"email": "derek@fml.co.uk"}, "changes": 1}

    data = client.get(f"/api/voter/{voter_id}").json()["data"]
    assert data["email"] == "derek@fml.co.uk"
    assert data["first_name"] == "Derek"


def test_update_email_of_missing_voter(client):
    resp = client.put("/api/voter/5", json={"email": "a@b.com"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "success", "data": {"email": "a@b.com"}, "changes": 0}


def test_update_email_requires_email(client):
    resp = client.put("/api/voter/1", json={"first_name": "Derek"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No email specified."}


def test_delete_voter(client):
    voter_id = _register(client, "Sandy", "Powell", "sp@fml.co.uk")

    resp = client.delete(f"/api/voter/{voter_id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "deleted", "changes": 1}
    assert client.get(f"/api/voter/{voter_id}").json()["data"] is None
    assert client.delete(f"/api/voter/{voter_id}").json()["changes"] == 0
