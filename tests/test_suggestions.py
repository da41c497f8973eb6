"""Tests for the three-tier account suggestion engine."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.application.use_cases.follows import follow_user
from app.application.use_cases.users import sign_in_with_oauth, suggest_users
from app.domain.entities import CurrentIdentity


def _make_users(session, *names: str) -> dict[str, int]:
    ids = {}
    for name in names:
        user = sign_in_with_oauth(
            session,
            provider="test",
            provider_account_id=name,
            email=f"{name}@example.com",
            name=name,
        )
        ids[name] = user.id
    return ids


def _follow(session, follower_id: int, target_id: int) -> None:
    follow_user(session, CurrentIdentity(user_id=follower_id), target_id=target_id)


def test_popular_accounts_come_first_and_exclusions_hold(db_session):
    ids = _make_users(db_session, "me", "friend", "star", "rising", "quiet")
    for fan in ("friend", "rising", "quiet"):
        _follow(db_session, ids[fan], ids["star"])
    _follow(db_session, ids["quiet"], ids["rising"])
    _follow(db_session, ids["me"], ids["friend"])

    suggestions = suggest_users(db_session, CurrentIdentity(user_id=ids["me"]), limit=3)

    assert [item.id for item in suggestions] == [ids["star"], ids["rising"], ids["quiet"]]
    assert [item.follower_count for item in suggestions] == [3, 1, 0]
    assert all(not item.is_following and not item.is_current_user for item in suggestions)


def test_tiers_fill_the_quota_without_duplicates(db_session):
    ids = _make_users(db_session, "me", "friend", "star", "fof", "newcomer")
    me = CurrentIdentity(user_id=ids["me"])
    for fan in ("friend", "fof", "newcomer"):
        _follow(db_session, ids[fan], ids["star"])
    _follow(db_session, ids["me"], ids["friend"])
    _follow(db_session, ids["friend"], ids["fof"])

    suggestions = suggest_users(db_session, me, limit=3, popular_min_followers=2)
    suggested_ids = [item.id for item in suggestions]

    # star is popular; fof is reached through friend; newcomer is the newest left.
    assert suggested_ids == [ids["star"], ids["fof"], ids["newcomer"]]
    assert len(set(suggested_ids)) == len(suggested_ids)
    assert ids["me"] not in suggested_ids
    assert ids["friend"] not in suggested_ids


def test_friend_of_friend_tier_only_returns_followees_of_followees(db_session):
    ids = _make_users(db_session, "me", "friend", "a", "b", "stranger")
    me = CurrentIdentity(user_id=ids["me"])
    _follow(db_session, ids["me"], ids["friend"])
    _follow(db_session, ids["friend"], ids["a"])
    _follow(db_session, ids["friend"], ids["b"])

    suggestions = suggest_users(db_session, me, limit=2, popular_min_followers=5)

    assert [item.id for item in suggestions] == [ids["a"], ids["b"]]


def test_small_pool_returns_everything_once(db_session):
    ids = _make_users(db_session, "me", "only")

    suggestions = suggest_users(db_session, CurrentIdentity(user_id=ids["me"]), limit=5)

    assert [item.id for item in suggestions] == [ids["only"]]


def test_suggestions_endpoint(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")
    client.post(f"/users/{bob.id}/follow", headers=carol.headers)

    response = client.get("/users/suggestions", params={"limit": 1}, headers=alice.headers)

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": bob.id,
            "name": "bob",
            "username": "bob",
            "image": None,
            "bio": None,
            "followerCount": 1,
            "isFollowing": False,
            "isCurrentUser": False,
        }
    ]
    assert client.get("/users/suggestions", params={"limit": 0}, headers=alice.headers).status_code == 400
    assert client.get("/users/suggestions", params={"limit": 51}, headers=alice.headers).status_code == 400


def test_shared_friend_of_friend_is_suggested_once(db_session):
    ids = _make_users(db_session, "me", "first", "second", "shared", "other")
    me = CurrentIdentity(user_id=ids["me"])
    _follow(db_session, ids["me"], ids["first"])
    _follow(db_session, ids["me"], ids["second"])
    _follow(db_session, ids["second"], ids["other"])
    _follow(db_session, ids["first"], ids["shared"])
    _follow(db_session, ids["second"], ids["shared"])

    suggestions = suggest_users(db_session, me, limit=5, popular_min_followers=99)

    assert [item.id for item in suggestions] == [ids["other"], ids["shared"]]
    assert suggestions[1].follower_count == 2
