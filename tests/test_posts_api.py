"""Integration tests for posts, feeds, likes and comments."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _post(client: TestClient, author, text: str = "hello", **extra) -> dict:
    response = client.post("/posts", json={"text": text, **extra}, headers=author.headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_post_length_boundary(client: TestClient, sign_in):
    alice = sign_in("alice")

    accepted = client.post("/posts", json={"text": "a" * 280}, headers=alice.headers)
    rejected = client.post("/posts", json={"text": "a" * 281}, headers=alice.headers)
    empty = client.post("/posts", json={"text": "   "}, headers=alice.headers)

    assert accepted.status_code == 201
    assert accepted.json()["author"]["id"] == alice.id
    assert accepted.json()["likeCount"] == 0
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "Post text cannot exceed 280 characters"}
    assert empty.status_code == 400


def test_duplicate_like_keeps_the_count(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice)

    assert client.post(f"/posts/{post['id']}/like", headers=bob.headers).status_code == 200
    duplicate = client.post(f"/posts/{post['id']}/like", headers=bob.headers)

    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "You have already liked this post"}
    as_bob = client.get(f"/posts/{post['id']}", headers=bob.headers).json()
    as_alice = client.get(f"/posts/{post['id']}", headers=alice.headers).json()
    assert as_bob["likeCount"] == 1
    assert as_bob["isLiked"] is True
    assert as_alice["isLiked"] is False


def test_like_notifies_owner_but_not_self(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice, "liked post")

    client.post(f"/posts/{post['id']}/like", headers=alice.headers)
    client.post(f"/posts/{post['id']}/like", headers=bob.headers)

    inbox = client.get("/users/notifications", headers=alice.headers).json()
    assert inbox["totalCount"] == 1
    item = inbox["items"][0]
    assert item["type"] == "LIKE"
    assert item["post"] == {"id": post["id"], "content": "liked post"}


def test_unlike_is_a_no_op_without_a_like(client: TestClient, sign_in):
    alice = sign_in("alice")
    post = _post(client, alice)

    client.post(f"/posts/{post['id']}/like", headers=alice.headers)
    assert client.delete(f"/posts/{post['id']}/like", headers=alice.headers).status_code == 200
    again = client.delete(f"/posts/{post['id']}/like", headers=alice.headers)

    assert again.status_code == 200
    assert client.get(f"/posts/{post['id']}", headers=alice.headers).json()["likeCount"] == 0
    assert client.post("/posts/9999/like", headers=alice.headers).status_code == 404
    assert client.delete("/posts/9999/like", headers=alice.headers).status_code == 404


def test_home_feed_contains_own_and_followed_posts(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")
    own = _post(client, alice, "mine")
    followed = _post(client, bob, "from bob")
    _post(client, carol, "from carol")
    client.post(f"/users/{bob.id}/follow", headers=alice.headers)

    feed = client.get("/posts", headers=alice.headers).json()
    only_following = client.get(
        "/posts", params={"following": "true"}, headers=alice.headers
    ).json()
    carol_following = client.get(
        "/posts", params={"following": "true"}, headers=carol.headers
    ).json()

    assert [post["id"] for post in feed] == [followed["id"], own["id"]]
    assert [post["id"] for post in only_following] == [followed["id"]]
    assert carol_following == []


def test_feed_pages_do_not_overlap(client: TestClient, sign_in):
    alice = sign_in("alice")
    for index in range(7):
        _post(client, alice, f"post {index}")

    seen: list[int] = []
    for page in (1, 2, 3):
        response = client.get(
            "/posts", params={"page": page, "limit": 3}, headers=alice.headers
        )
        seen.extend(post["id"] for post in response.json())

    assert len(seen) == 7
    assert len(set(seen)) == 7
    beyond = client.get("/posts", params={"page": 4, "limit": 3}, headers=alice.headers)
    assert beyond.json() == []


def test_explore_ranks_by_likes_then_comments_then_recency(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")

    quiet = _post(client, alice, "quiet")
    commented = _post(client, alice, "commented")
    liked_once = _post(client, bob, "liked once")
    liked_twice = _post(client, carol, "liked twice")
    newest_quiet = _post(client, bob, "newest quiet")

    for user in (bob, carol):
        client.post(f"/posts/{liked_twice['id']}/like", headers=user.headers)
    client.post(f"/posts/{liked_once['id']}/like", headers=alice.headers)
    client.post(
        f"/posts/{commented['id']}/comments", json={"text": "nice"}, headers=bob.headers
    )

    explore = client.get("/posts/explore", headers=alice.headers).json()

    assert [post["id"] for post in explore] == [
        liked_twice["id"],
        liked_once["id"],
        commented["id"],
        newest_quiet["id"],
        quiet["id"],
    ]
    keys = [(post["likeCount"], post["commentCount"]) for post in explore]
    assert keys == sorted(keys, reverse=True)

    first = client.get("/posts/explore", params={"limit": 2}, headers=alice.headers).json()
    second = client.get(
        "/posts/explore", params={"limit": 2, "page": 2}, headers=alice.headers
    ).json()
    assert not {post["id"] for post in first} & {post["id"] for post in second}


def test_only_the_owner_can_edit_or_delete_a_post(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice, "original", image="https://img/1.png")

    forbidden = client.patch(f"/posts/{post['id']}", json={"text": "hacked"}, headers=bob.headers)
    assert forbidden.status_code == 403
    assert forbidden.json() == {"error": "You can only update your own posts"}

    edited = client.patch(f"/posts/{post['id']}", json={"text": "edited"}, headers=alice.headers)
    assert edited.status_code == 200
    assert edited.json()["text"] == "edited"
    assert edited.json()["image"] == "https://img/1.png"

    too_long = client.patch(
        f"/posts/{post['id']}", json={"text": "a" * 281}, headers=alice.headers
    )
    assert too_long.status_code == 400

    assert client.delete(f"/posts/{post['id']}", headers=bob.headers).status_code == 403
    deleted = client.delete(f"/posts/{post['id']}", headers=alice.headers)
    assert deleted.json() == {"success": True}
    assert client.get(f"/posts/{post['id']}", headers=alice.headers).status_code == 404
    assert client.delete(f"/posts/{post['id']}", headers=alice.headers).status_code == 404


def test_deleting_a_post_removes_its_likes_and_comments(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice)
    client.post(f"/posts/{post['id']}/like", headers=bob.headers)
    comment = client.post(
        f"/posts/{post['id']}/comments", json={"text": "hi"}, headers=bob.headers
    ).json()

    client.delete(f"/posts/{post['id']}", headers=alice.headers)

    assert client.delete(f"/comments/{comment['id']}", headers=bob.headers).status_code == 404
    inbox = client.get("/users/notifications", headers=alice.headers).json()
    assert inbox["totalCount"] == 2
    assert all(item["post"] is None for item in inbox["items"])


def test_comment_lifecycle(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice)

    created = client.post(
        f"/posts/{post['id']}/comments", json={"text": "first!"}, headers=bob.headers
    )
    assert created.status_code == 201
    comment = created.json()
    assert comment["author"]["id"] == bob.id

    listed = client.get(f"/posts/{post['id']}/comments", headers=alice.headers).json()
    assert [item["id"] for item in listed] == [comment["id"]]
    assert client.get(f"/posts/{post['id']}", headers=alice.headers).json()["commentCount"] == 1

    forbidden = client.put(
        f"/comments/{comment['id']}", json={"text": "edit"}, headers=alice.headers
    )
    assert forbidden.status_code == 403
    assert forbidden.json() == {"error": "You can only edit your own comments"}

    edited = client.put(f"/comments/{comment['id']}", json={"text": "edited"}, headers=bob.headers)
    assert edited.status_code == 200
    assert edited.json()["text"] == "edited"

    too_long = client.post(
        f"/posts/{post['id']}/comments", json={"text": "a" * 501}, headers=bob.headers
    )
    assert too_long.status_code == 400
    assert client.post(
        "/posts/9999/comments", json={"text": "hi"}, headers=bob.headers
    ).status_code == 404
    assert client.get("/posts/9999/comments", headers=bob.headers).status_code == 404
    assert client.post(
        "/posts/9999/comments", json={"text": "   "}, headers=bob.headers
    ).status_code == 404

    assert client.delete(f"/comments/{comment['id']}", headers=alice.headers).status_code == 403
    deleted = client.delete(f"/comments/{comment['id']}", headers=bob.headers)
    assert deleted.status_code == 200
    assert client.put(
        f"/comments/{comment['id']}", json={"text": "x"}, headers=bob.headers
    ).status_code == 404


def test_comment_notification_keeps_an_excerpt(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    post = _post(client, alice)
    text = "b" * 150

    client.post(f"/posts/{post['id']}/comments", json={"text": text}, headers=bob.headers)
    client.post(f"/posts/{post['id']}/comments", json={"text": "self"}, headers=alice.headers)

    items = client.get("/users/notifications", headers=alice.headers).json()["items"]
    assert len(items) == 1
    assert items[0]["type"] == "COMMENT"
    assert items[0]["comment"] == {"content": "b" * 100}
