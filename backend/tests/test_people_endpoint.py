import uuid

from sqlalchemy import text

from backend.app.db import models
from backend.app.db.sample_data import seed_people

NEW_USER = {
    "firstname": "Grace",
    "lastname": "Hopper",
    "username": "grace",
    "email": "grace@example.com",
    "password": "cobol60",
}


def test_create_and_fetch_user(client):
    resp = client.post("/api/users", json=NEW_USER)
    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["username"] == "grace"
    assert "password" not in user

    resp = client.get(f"/api/users/{user['id']}")
    assert resp.status_code == 200
    emails = resp.json()["user"]["emails"]
    assert [e["address"] for e in emails] == ["grace@example.com"]
    assert emails[0]["isPrimary"] is True
    assert "ownerId" not in emails[0]


def test_duplicate_username_is_conflict(client):
    assert client.post("/api/users", json=NEW_USER).status_code == 201
    resp = client.post("/api/users", json={**NEW_USER, "email": "other@example.com"})
    assert resp.status_code == 409
    assert resp.json()["status"] == 409


def test_create_user_validation(client):
    resp = client.post("/api/users", json={**NEW_USER, "password": "123", "email": "nope"})
    assert resp.status_code == 400
    message = resp.json()["message"]
    assert "password" in message
    assert "email" in message


def test_search_users_and_admins(client, SessionLocal):
    with SessionLocal() as session:
        seed_people(session, models.Role.USER)
        admin = models.Person(
            firstname="Alice", lastname="Admin", username="alice_admin", password="secret1", role="admin"
        )
        session.add(admin)
        session.commit()

    resp = client.get("/api/users", params={"firstname": "Alice", "lastname": "Smith"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["results"] == 1
    assert data["users"][0]["username"] == "alice_smith"
    assert "emails" not in data["users"][0]

    resp = client.get("/api/users", params={"username": "sarah", "emails": "true"})
    assert resp.json()["users"][0]["emails"][0]["address"] == "sarah.j@example.com"

    resp = client.get("/api/admins", params={"firstname": "Alice", "lastname": "Smith"})
    data = resp.json()
    assert data["results"] == 1
    assert data["admins"][0]["username"] == "alice_admin"


def test_update_and_delete_admin(client):
    resp = client.post("/api/admins", json={**NEW_USER, "username": "boss", "email": "boss@example.com"})
    admin_id = resp.json()["admin"]["id"]

    resp = client.patch(f"/api/admins/{admin_id}", json={"lastname": "Renamed"})
    assert resp.json() == {"status": 200, "message": "Admin has been updated"}

    # Admins are not reachable through the user routes.
    assert client.get(f"/api/users/{admin_id}").status_code == 404
    assert client.delete(f"/api/users/{admin_id}").status_code == 404

    assert client.get(f"/api/admins/{admin_id}").json()["admin"]["lastname"] == "Renamed"
    assert client.delete(f"/api/admins/{admin_id}").status_code == 200
    assert client.delete(f"/api/admins/{admin_id}").status_code == 404


def test_update_user_rejects_unknown_gender(client):
    resp = client.post("/api/users", json=NEW_USER)
    user_id = resp.json()["user"]["id"]
    resp = client.patch(f"/api/users/{user_id}", json={"gender": "robot"})
    assert resp.status_code == 400


def test_update_missing_user(client):
    resp = client.patch(f"/api/users/{uuid.uuid4()}", json={"firstname": "X"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_database_failure_returns_generic_500(client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE people"))

    resp = client.post("/api/users", json={**NEW_USER, "password": "hunter2-secret"})
    assert resp.status_code == 500
    assert resp.json() == {"status": 500, "message": "Internal Server Error"}
    assert "hunter2-secret" not in resp.text
    assert "INSERT" not in resp.text
    assert "grace@example.com" not in resp.text
