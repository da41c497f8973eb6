"""Integration tests for profiles, search and the follow graph."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _follow(client: TestClient, actor, target_id: int):
    return client.post(f"/users/{target_id}/follow", headers=actor.headers)


def test_follow_visibility_depends_on_the_viewer(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")

    assert client.patch("/users/me", json={"bio": ""}, headers=alice.headers).status_code == 200
    assert _follow(client, alice, bob.id).status_code == 200

    as_alice = client.get(f"/users/{bob.id}", headers=alice.headers).json()
    as_carol = client.get(f"/users/{bob.id}", headers=carol.headers).json()

    assert as_alice["isFollowing"] is True
    assert as_carol["isFollowing"] is False
    assert as_alice["followersCount"] == 1
    assert as_alice["isCurrentUser"] is False


def test_duplicate_follow_is_rejected_and_keeps_one_edge(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")

    assert _follow(client, alice, bob.id).json() == {"message": "User followed successfully"}
    second = _follow(client, alice, bob.id)

    assert second.status_code == 400
    assert second.json() == {"error": "You are already following this user"}
    profile = client.get(f"/users/{bob.id}", headers=bob.headers).json()
    assert profile["followersCount"] == 1


def test_follow_then_unfollow_restores_the_graph(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")

    _follow(client, alice, bob.id)
    response = client.delete(f"/users/{bob.id}/follow", headers=alice.headers)

    assert response.status_code == 200
    me = client.get("/users/me", headers=alice.headers).json()
    assert me["followingCount"] == 0

    again = client.delete(f"/users/{bob.id}/follow", headers=alice.headers)
    assert again.status_code == 400
    assert again.json() == {"error": "You are not following this user"}


def test_self_follow_and_unknown_targets(client: TestClient, sign_in):
    alice = sign_in("alice")

    response = _follow(client, alice, alice.id)
    assert response.status_code == 400
    assert response.json() == {"error": "You cannot follow yourself"}
    assert client.get("/users/me", headers=alice.headers).json()["followingCount"] == 0

    assert _follow(client, alice, 9999).status_code == 404
    assert client.delete("/users/9999/follow", headers=alice.headers).status_code == 404
    assert client.get("/users/9999", headers=alice.headers).status_code == 404


def test_follow_creates_a_single_notification(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")

    _follow(client, alice, bob.id)
    _follow(client, alice, bob.id)

    inbox = client.get("/users/notifications", headers=bob.headers).json()
    assert inbox["totalCount"] == 1
    assert inbox["items"][0]["type"] == "FOLLOW"
    assert inbox["items"][0]["actor"]["id"] == alice.id


def test_follower_lists_flag_the_callers_own_edges(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")

    _follow(client, bob, alice.id)
    _follow(client, carol, alice.id)
    _follow(client, alice, carol.id)

    followers = client.get(f"/users/{alice.id}/followers", headers=alice.headers).json()

    assert [entry["id"] for entry in followers] == [carol.id, bob.id]
    by_id = {entry["id"]: entry for entry in followers}
    assert by_id[carol.id]["isFollowing"] is True
    assert by_id[bob.id]["isFollowing"] is False
    assert all(entry["followedAt"] for entry in followers)

    following = client.get(f"/users/{bob.id}/following", headers=alice.headers).json()
    assert [entry["id"] for entry in following] == [alice.id]
    assert following[0]["isCurrentUser"] is True
    assert following[0]["isFollowing"] is False

    assert client.get("/users/9999/followers", headers=alice.headers).status_code == 404


def test_update_profile_validation(client: TestClient, sign_in):
    alice = sign_in("alice")
    sign_in("bob")

    ok = client.patch(
        "/users/me",
        json={"username": "alice_w", "bio": "hello", "coverImage": "https://img/c.png"},
        headers=alice.headers,
    )
    assert ok.status_code == 200
    body = ok.json()
    assert body["username"] == "alice_w"
    assert body["bio"] == "hello"
    assert body["coverImage"] == "https://img/c.png"

    cases = [
        ({"username": "bob"}, "Username is already taken"),
        ({"username": "ab"}, "Username must be between 3 and 20 characters"),
        ({"username": "no-dash"}, "Username can only contain letters, numbers, and underscores"),
        ({"bio": "x" * 161}, "Bio cannot exceed 160 characters"),
    ]
    for payload, message in cases:
        response = client.patch("/users/me", json=payload, headers=alice.headers)
        assert response.status_code == 400
        assert response.json() == {"error": message}

    assert client.patch("/users/me", json={"password": "x"}, headers=alice.headers).status_code == 400


def test_search_matches_name_or_username(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("Bobby Tables", email="bobby@example.com", account_id="bobby")
    sign_in("carol")
    _follow(client, alice, bob.id)

    response = client.get("/users/search", params={"q": "BOB"}, headers=alice.headers)

    assert response.status_code == 200
    results = response.json()
    assert [user["id"] for user in results] == [bob.id]
    assert results[0]["isFollowing"] is True

    own = client.get("/users/search", params={"q": "ali"}, headers=alice.headers).json()
    assert own[0]["isCurrentUser"] is True

    for params in ({}, {"q": "   "}):
        missing = client.get("/users/search", params=params, headers=alice.headers)
        assert missing.status_code == 400
        assert missing.json() == {"error": "Search query is required"}


def test_user_posts_listing_is_paginated(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    for index in range(3):
        client.post("/posts", json={"text": f"post {index}"}, headers=bob.headers)

    first = client.get(
        f"/users/{bob.id}/posts", params={"limit": 2}, headers=alice.headers
    ).json()
    second = client.get(
        f"/users/{bob.id}/posts", params={"limit": 2, "page": 2}, headers=alice.headers
    ).json()

    assert first["totalCount"] == 3
    assert first["hasMore"] is True
    assert [post["text"] for post in first["items"]] == ["post 2", "post 1"]
    assert second["hasMore"] is False
    assert [post["text"] for post in second["items"]] == ["post 0"]
    assert client.get("/users/9999/posts", headers=alice.headers).status_code == 404


def test_pagination_parameters_are_validated(client: TestClient, sign_in):
    alice = sign_in("alice")

    assert client.get("/posts", params={"page": 0}, headers=alice.headers).status_code == 400
    assert client.get("/posts", params={"limit": 101}, headers=alice.headers).status_code == 400


def test_search_treats_wildcards_literally(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")
    assert client.patch("/users/me", json={"username": "a_b"}, headers=bob.headers).status_code == 200
    assert client.patch("/users/me", json={"username": "axb"}, headers=carol.headers).status_code == 200

    def search(term: str) -> list[int]:
        response = client.get("/users/search", params={"q": term}, headers=alice.headers)
        assert response.status_code == 200
        return [user["id"] for user in response.json()]

    assert search("a_b") == [bob.id]
    assert search("_") == [bob.id]
    assert search("%") == []
    assert search("\\") == []
