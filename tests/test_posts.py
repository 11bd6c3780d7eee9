"""Tests for post, like and comment endpoints."""

from src.models.post import PostLike
from src.services.post_service import PostService


def create_post(client, headers, text="Hello world"):
    response = client.post("/api/posts", headers=headers, json={"text": text})
    assert response.status_code == 200
    return response.json()


def test_create_post(client, auth_headers):
    """Post copies the author's name and avatar."""
    post = create_post(client, auth_headers)

    assert post["text"] == "Hello world"
    assert post["user_id"] == auth_headers.user_id
    assert post["name"] == "Test User"
    assert post["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert post["likes"] == []
    assert post["comments"] == []


def test_create_post_requires_text(client, auth_headers):
    response = client.post("/api/posts", headers=auth_headers, json={"text": "   "})
    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "text"


def test_posts_require_authentication(client):
    assert client.get("/api/posts").status_code == 401
    assert client.post("/api/posts", json={"text": "hi"}).status_code == 401


def test_get_posts_newest_first(client, auth_headers):
    first = create_post(client, auth_headers, "first")
    second = create_post(client, auth_headers, "second")

    response = client.get("/api/posts", headers=auth_headers)
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


def test_get_post(client, auth_headers):
    post = create_post(client, auth_headers)

    response = client.get(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == post["id"]


def test_get_missing_post(client, auth_headers):
    response = client.get("/api/posts/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Post not found"


def test_delete_post_ownership(client, auth_headers, other_auth_headers):
    """Only the owner may delete; the post is gone afterwards."""
    post = create_post(client, auth_headers)

    response = client.delete(f"/api/posts/{post['id']}", headers=other_auth_headers)
    assert response.status_code == 401
    assert client.get(f"/api/posts/{post['id']}", headers=auth_headers).status_code == 200

    response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["msg"] == f"Post {post['id']} deleted"

    response = client.get(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_missing_post(client, auth_headers):
    assert client.delete("/api/posts/99999", headers=auth_headers).status_code == 404


def test_toggle_like(client, auth_headers):
    """Liking twice returns the like list to its original state."""
    post = create_post(client, auth_headers)

    response = client.put(f"/api/posts/{post['id']}/like", headers=auth_headers)
    assert response.status_code == 200
    likes = response.json()
    assert [like["user_id"] for like in likes] == [auth_headers.user_id]

    response = client.put(f"/api/posts/{post['id']}/like", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == post["likes"] == []


def test_likes_from_two_users(client, auth_headers, other_auth_headers):
    post = create_post(client, auth_headers)

    client.put(f"/api/posts/{post['id']}/like", headers=auth_headers)
    response = client.put(f"/api/posts/{post['id']}/like", headers=other_auth_headers)

    # Newest first
    assert [like["user_id"] for like in response.json()] == [
        other_auth_headers.user_id,
        auth_headers.user_id,
    ]

    # Unliking only removes the caller's like
    response = client.put(f"/api/posts/{post['id']}/like", headers=auth_headers)
    assert [like["user_id"] for like in response.json()] == [other_auth_headers.user_id]


def test_like_missing_post(client, auth_headers):
    assert client.put("/api/posts/99999/like", headers=auth_headers).status_code == 404


def test_add_comment(client, auth_headers, other_auth_headers):
    post = create_post(client, auth_headers)

    response = client.post(
        f"/api/posts/{post['id']}/comments",
        headers=other_auth_headers,
        json={"text": "Nice post"},
    )
    assert response.status_code == 200
    comments = response.json()
    assert len(comments) == 1
    assert comments[0]["text"] == "Nice post"
    assert comments[0]["user_id"] == other_auth_headers.user_id
    assert comments[0]["name"] == "Other User"


def test_add_comment_validation(client, auth_headers):
    post = create_post(client, auth_headers)

    response = client.post(f"/api/posts/{post['id']}/comments", headers=auth_headers, json={})
    assert response.status_code == 400


def test_add_comment_missing_post(client, auth_headers):
    response = client.post(
        "/api/posts/99999/comments", headers=auth_headers, json={"text": "Hello?"}
    )
    assert response.status_code == 404


def test_delete_comment_removes_addressed_comment(client, auth_headers, other_auth_headers):
    """The comment named in the URL is removed, not the caller's first comment."""
    post = create_post(client, auth_headers)
    url = f"/api/posts/{post['id']}/comments"
    client.post(url, headers=other_auth_headers, json={"text": "one"})
    comments = client.post(url, headers=other_auth_headers, json={"text": "two"}).json()
    older = next(c for c in comments if c["text"] == "one")

    response = client.delete(f"{url}/{older['id']}", headers=other_auth_headers)
    assert response.status_code == 200
    assert [c["text"] for c in response.json()] == ["two"]


def test_post_owner_can_delete_any_comment(client, auth_headers, other_auth_headers):
    post = create_post(client, auth_headers)
    url = f"/api/posts/{post['id']}/comments"
    comment = client.post(url, headers=other_auth_headers, json={"text": "spam"}).json()[0]

    response = client.delete(f"{url}/{comment['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_delete_comment_unauthorized(client, auth_headers, other_auth_headers, register_user):
    """A third user may not delete someone else's comment on someone else's post."""
    third = register_user("Third User", "third@example.com")
    post = create_post(client, auth_headers)
    url = f"/api/posts/{post['id']}/comments"
    comment = client.post(url, headers=other_auth_headers, json={"text": "mine"}).json()[0]

    response = client.delete(f"{url}/{comment['id']}", headers=third)
    assert response.status_code == 401

    comments = client.get(f"/api/posts/{post['id']}", headers=auth_headers).json()["comments"]
    assert [c["id"] for c in comments] == [comment["id"]]


def test_delete_missing_comment(client, auth_headers):
    post = create_post(client, auth_headers)

    response = client.delete(f"/api/posts/{post['id']}/comments/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Comment does not exist"


def test_concurrent_duplicate_like_is_ignored(
    client, auth_headers, session_factory, monkeypatch
):
    """A like inserted by another request between read and write is kept, not duplicated."""
    post = create_post(client, auth_headers)
    original_get_post = PostService.get_post

    def get_post_then_like_elsewhere(self, post_id):
        loaded = original_get_post(self, post_id)
        assert loaded.likes == []
        other = session_factory()
        try:
            other.add(PostLike(post_id=post_id, user_id=auth_headers.user_id))
            other.commit()
        finally:
            other.close()
        return loaded

    monkeypatch.setattr(PostService, "get_post", get_post_then_like_elsewhere)

    response = client.put(f"/api/posts/{post['id']}/like", headers=auth_headers)
    assert response.status_code == 200
    assert [like["user_id"] for like in response.json()] == [auth_headers.user_id]
