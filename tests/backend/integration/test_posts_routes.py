import asyncio
import uuid

import pytest


pytestmark = pytest.mark.asyncio


async def _register_and_login(client, username: str | None = None, password: str = "PostTest#1"):
    username = username or f"user_{uuid.uuid4().hex[:6]}"
    reg = await client.post("/api/register", json={"username": username, "password": password})
    assert reg.status_code == 201, reg.text
    resp = await client.post("/api/login", json={"username": username, "password": password})
    token = resp.json()["token"]
    return {"Authorization": f"Bearer {token}"}, reg.json()["id"]


async def test_alice_scenario(client):
    alice_headers, alice_id = await _register_and_login(client, "alice", "pw1")
    bob_headers, _ = await _register_and_login(client, "bob", "pw2")

    create_resp = await client.post("/api/posts", headers=alice_headers, data={"title": "T", "content": "C"})
    assert create_resp.status_code == 201
    post = create_resp.json()
    assert post["author"] == alice_id
    assert post["title"] == "T"
    assert post["content"] == "C"
    assert post["image"] is None
    assert post["createdAt"]

    detail = await client.get(f"/api/posts/{post['id']}")
    assert detail.status_code == 200
    assert detail.json()["id"] == post["id"]
    assert detail.json()["author"] == {"id": alice_id, "username": "alice"}

    forbidden = await client.put(f"/api/posts/{post['id']}", headers=bob_headers, json={"title": "hacked"})
    assert forbidden.status_code == 403
    assert forbidden.json()["code"] == "FORBIDDEN"

    delete_resp = await client.delete(f"/api/posts/{post['id']}", headers=alice_headers)
    assert delete_resp.status_code == 200

    missing = await client.get(f"/api/posts/{post['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"]


async def test_create_post_requires_token(client):
    resp = await client.post("/api/posts", data={"title": "T", "content": "C"})
    assert resp.status_code == 401

    list_resp = await client.get("/api/posts")
    assert list_resp.json() == []


async def test_create_post_requires_title_and_content(client):
    headers, _ = await _register_and_login(client)
    resp = await client.post("/api/posts", headers=headers, data={"title": "T"})
    assert resp.status_code == 400


async def test_list_posts_is_public_and_resolves_authors(client):
    alice_headers, _ = await _register_and_login(client, "alice")
    bob_headers, _ = await _register_and_login(client, "bob")
    await client.post("/api/posts", headers=alice_headers, data={"title": "one", "content": "1"})
    await client.post("/api/posts", headers=bob_headers, data={"title": "two", "content": "2"})

    resp = await client.get("/api/posts")
    assert resp.status_code == 200
    items = resp.json()
    assert [p["title"] for p in items] == ["one", "two"]
    assert [p["author"]["username"] for p in items] == ["alice", "bob"]


async def test_partial_update_is_idempotent(client):
    headers, _ = await _register_and_login(client)
    post_id = (await client.post("/api/posts", headers=headers, data={"title": "T", "content": "C"})).json()["id"]

    first = await client.put(f"/api/posts/{post_id}", headers=headers, json={"title": "New"})
    second = await client.put(f"/api/posts/{post_id}", headers=headers, json={"title": "New"})
    assert first.status_code == second.status_code == 200
    assert first.json()["title"] == second.json()["title"] == "New"
    assert first.json()["content"] == second.json()["content"] == "C"

    empty = await client.put(f"/api/posts/{post_id}", headers=headers, json={"title": "", "content": ""})
    assert empty.json()["title"] == "New"
    assert empty.json()["content"] == "C"

    content_only = await client.put(f"/api/posts/{post_id}", headers=headers, json={"content": "C2"})
    assert content_only.json()["title"] == "New"
    assert content_only.json()["content"] == "C2"


async def test_update_and_delete_unknown_post(client):
    headers, _ = await _register_and_login(client)
    for post_id in (str(uuid.uuid4()), "not-a-uuid"):
        assert (await client.get(f"/api/posts/{post_id}")).status_code == 404
        assert (await client.put(f"/api/posts/{post_id}", headers=headers, json={"title": "x"})).status_code == 404
        assert (await client.delete(f"/api/posts/{post_id}", headers=headers)).status_code == 404


async def test_non_author_cannot_delete(client):
    alice_headers, _ = await _register_and_login(client)
    bob_headers, _ = await _register_and_login(client)
    post_id = (await client.post("/api/posts", headers=alice_headers, data={"title": "T", "content": "C"})).json()["id"]

    resp = await client.delete(f"/api/posts/{post_id}", headers=bob_headers)
    assert resp.status_code == 403
    assert (await client.get(f"/api/posts/{post_id}")).status_code == 200


async def test_update_and_delete_require_token(client):
    headers, _ = await _register_and_login(client)
    post_id = (await client.post("/api/posts", headers=headers, data={"title": "T", "content": "C"})).json()["id"]

    assert (await client.put(f"/api/posts/{post_id}", json={"title": "x"})).status_code == 401
    assert (await client.delete(f"/api/posts/{post_id}")).status_code == 401


async def test_create_post_with_image(client, upload_dir):
    headers, _ = await _register_and_login(client)
    resp = await client.post(
        "/api/posts",
        headers=headers,
        data={"title": "Pic", "content": "with image"},
        files={"image": ("photo.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )
    assert resp.status_code == 201, resp.text
    image_url = resp.json()["image"]
    assert image_url.startswith("/uploads/")
    assert image_url.endswith(".png")

    stored = upload_dir / image_url.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG\r\n\x1a\nfake"


async def test_create_post_rejects_non_image_upload(client):
    headers, _ = await _register_and_login(client)
    resp = await client.post(
        "/api/posts",
        headers=headers,
        data={"title": "Doc", "content": "not an image"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert resp.status_code == 400
    assert (await client.get("/api/posts")).json() == []


async def test_concurrent_post_creation(client):
    headers, _ = await _register_and_login(client)
    responses = await asyncio.gather(*[
        client.post("/api/posts", headers=headers, data={"title": f"Concurrent {i}", "content": "c"})
        for i in range(10)
    ])
    assert all(r.status_code == 201 for r in responses)
    ids = [r.json()["id"] for r in responses]
    assert len(set(ids)) == 10

    titles = {p["title"] for p in (await client.get("/api/posts")).json()}
    assert titles == {f"Concurrent {i}" for i in range(10)}


async def test_rejected_post_leaves_no_image_behind(client, upload_dir):
    headers, _ = await _register_and_login(client)
    resp = await client.post(
        "/api/posts",
        headers=headers,
        data={"title": "", "content": "no title"},
        files={"image": ("photo.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )
    assert resp.status_code == 400
    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []


async def test_image_removed_when_post_is_not_stored(client, upload_dir):
    headers, _ = await _register_and_login(client)
    assert (await client.delete("/api/users", headers=headers)).status_code == 200

    resp = await client.post(
        "/api/posts",
        headers=headers,
        data={"title": "Pic", "content": "orphan"},
        files={"image": ("photo.png", b"\x89PNG\r\n\x1a\nfake", "image/png")},
    )
    assert resp.status_code == 401
    assert list(upload_dir.iterdir()) == []


async def test_update_without_body_changes_nothing(client):
    headers, _ = await _register_and_login(client)
    post_id = (await client.post("/api/posts", headers=headers, data={"title": "T", "content": "C"})).json()["id"]

    resp = await client.put(f"/api/posts/{post_id}", headers=headers)
    assert resp.status_code == 200
    assert (resp.json()["title"], resp.json()["content"]) == ("T", "C")
