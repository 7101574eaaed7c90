import uuid

from sqlalchemy import text

from backend.app.db.sample_data import seed_posts


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_posts_with_title_search(client, SessionLocal):
    with SessionLocal() as session:
        seed_posts(session)

    resp = client.get("/api/posts", params={"title": "web"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == 200
    assert data["results"] == 2
    assert {"id", "title", "description", "createdAt", "updatedAt"} <= set(data["posts"][0])


def test_list_posts_rejects_bad_pagination(client):
    resp = client.get("/api/posts", params={"page": 0})
    assert resp.status_code == 400
    assert resp.json()["status"] == 400


def test_post_lifecycle(client):
    resp = client.post("/api/posts", json={"title": "First", "description": "Body"})
    assert resp.status_code == 201
    post = resp.json()["post"]
    post_id = post["id"]

    resp = client.patch(f"/api/posts/{post_id}", json={"description": "Edited"})
    assert resp.status_code == 200
    assert resp.json() == {"status": 200, "message": "Post has been updated"}

    resp = client.get(f"/api/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.json()["post"]["title"] == "First"
    assert resp.json()["post"]["description"] == "Edited"

    resp = client.delete(f"/api/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Post has been deleted"

    resp = client.delete(f"/api/posts/{post_id}")
    assert resp.status_code == 404
    assert resp.json() == {"status": 404, "message": "Post not found"}


def test_create_post_requires_title(client):
    resp = client.post("/api/posts", json={"title": "", "description": "Body"})
    assert resp.status_code == 400
    assert "title" in resp.json()["message"]


def test_update_post_with_empty_body(client):
    resp = client.post("/api/posts", json={"title": "First", "description": "Body"})
    post_id = resp.json()["post"]["id"]

    resp = client.patch(f"/api/posts/{post_id}", json={})
    assert resp.status_code == 400
    assert resp.json()["message"] == "At least one field must be provided"


def test_update_missing_post(client):
    resp = client.patch(f"/api/posts/{uuid.uuid4()}", json={"title": "x"})
    assert resp.status_code == 404


def test_get_post_invalid_id(client):
    resp = client.get("/api/posts/not-a-uuid")
    assert resp.status_code == 400


def test_search_failure_hides_statement(client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE posts"))

    resp = client.get("/api/posts", params={"title": "secret-term"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == 500
    assert body["message"] == "Internal Server Error"
    assert "SELECT" not in resp.text
    assert "secret-term" not in resp.text
