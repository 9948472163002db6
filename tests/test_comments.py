# tests/test_comments.py

from .conftest import bearer


def test_add_comment_appends_in_order(client, alice, bob, alice_post) -> None:
    url = f"/api/posts/{alice_post['id']}/comments"
    first = client.post(url, json={"content": "first!"}, headers=bearer(bob["token"]))
    assert first.status_code == 200
    second = client.post(url, json={"content": "thanks"}, headers=bearer(alice["token"]))
    assert second.status_code == 200

    comments = second.json()["comments"]
    assert [c["content"] for c in comments] == ["first!", "thanks"]
    assert [c["author"]["username"] for c in comments] == ["bob", "alice"]
    assert all(c["createdAt"] for c in comments)


def test_comments_are_resolved_when_listing(client, bob, alice_post) -> None:
    client.post(f"/api/posts/{alice_post['id']}/comments", json={"content": "hey"},
                headers=bearer(bob["token"]))
    listed = client.get("/api/posts").json()[0]
    assert listed["author"]["username"] == "alice"
    assert listed["comments"][0]["author"]["username"] == "bob"


def test_comment_requires_content(client, bob, alice_post) -> None:
    resp = client.post(f"/api/posts/{alice_post['id']}/comments", json={"content": "  "},
                       headers=bearer(bob["token"]))
    assert resp.status_code == 400
    assert resp.json() == {"message": "Comment content is required"}


def test_comment_on_missing_post_is_not_found(client, bob) -> None:
    resp = client.post("/api/posts/9999/comments", json={"content": "hello"}, headers=bearer(bob["token"]))
    assert resp.status_code == 404


def test_comment_requires_token(client, alice_post) -> None:
    resp = client.post(f"/api/posts/{alice_post['id']}/comments", json={"content": "hello"})
    assert resp.status_code == 401
