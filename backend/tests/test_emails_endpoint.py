import uuid


def _create_user(client) -> str:
    resp = client.post(
        "/api/users",
        json={
            "firstname": "Linus",
            "lastname": "T",
            "username": "linus",
            "email": "linus@example.com",
            "password": "kernel1",
        },
    )
    return resp.json()["user"]["id"]


def test_email_lifecycle(client):
    owner_id = _create_user(client)

    resp = client.post(f"/api/people/{owner_id}/emails", json={"address": "l2@example.com", "isPrivate": False})
    assert resp.status_code == 201
    body = resp.json()
    assert body["ownerId"] == owner_id
    email = body["email"]
    assert email["isPrivate"] is False
    assert email["isPrimary"] is False

    resp = client.get(f"/api/people/{owner_id}/emails")
    assert resp.json()["results"] == 2

    resp = client.get(f"/api/people/{owner_id}/emails", params={"is_primary": "false"})
    assert [e["address"] for e in resp.json()["emails"]] == ["l2@example.com"]

    resp = client.patch(f"/api/people/{owner_id}/emails/{email['id']}", json={"isVerified": True})
    assert resp.status_code == 200

    resp = client.get(f"/api/people/{owner_id}/emails/{email['id']}")
    assert resp.json()["email"]["isVerified"] is True

    assert client.delete(f"/api/people/{owner_id}/emails/{email['id']}").status_code == 200
    assert client.delete(f"/api/people/{owner_id}/emails/{email['id']}").status_code == 404


def test_duplicate_address_is_conflict(client):
    owner_id = _create_user(client)
    resp = client.post(f"/api/people/{owner_id}/emails", json={"address": "linus@example.com"})
    assert resp.status_code == 409


def test_create_email_for_missing_owner(client):
    resp = client.post(f"/api/people/{uuid.uuid4()}/emails", json={"address": "x@example.com"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Owner not found"


def test_invalid_email_address(client):
    owner_id = _create_user(client)
    resp = client.post(f"/api/people/{owner_id}/emails", json={"address": "not-an-email"})
    assert resp.status_code == 400


def test_empty_email_update(client):
    owner_id = _create_user(client)
    email_id = client.get(f"/api/people/{owner_id}/emails").json()["emails"][0]["id"]
    resp = client.patch(f"/api/people/{owner_id}/emails/{email_id}", json={})
    assert resp.status_code == 400
