"""Integration tests for direct messages and conversations."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _send(client: TestClient, sender, recipient_id: int, content: str):
    return client.post(
        f"/messages/{recipient_id}", json={"content": content}, headers=sender.headers
    )


def test_send_message_validation(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")

    created = _send(client, alice, bob.id, "hi bob")
    assert created.status_code == 201
    body = created.json()
    assert body["isOwnMessage"] is True
    assert body["fromUser"]["id"] == alice.id
    assert body["isRead"] is False

    assert _send(client, alice, alice.id, "me").json() == {
        "error": "You cannot send a message to yourself"
    }
    assert _send(client, alice, 9999, "hi").status_code == 404
    assert _send(client, alice, bob.id, "  ").status_code == 400
    assert _send(client, alice, bob.id, "x" * 1000).status_code == 201
    too_long = _send(client, alice, bob.id, "x" * 1001)
    assert too_long.status_code == 400
    assert too_long.json() == {"error": "Message content cannot exceed 1000 characters"}


def test_opening_a_thread_marks_messages_read(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    _send(client, bob, alice.id, "one")
    _send(client, bob, alice.id, "two")
    _send(client, alice, bob.id, "reply")

    thread = client.get(f"/messages/{bob.id}", headers=alice.headers).json()

    assert [message["content"] for message in thread] == ["reply", "two", "one"]
    assert [message["isOwnMessage"] for message in thread] == [True, False, False]

    conversations = client.get("/messages", headers=alice.headers).json()
    assert conversations[0]["unreadCount"] == 0

    again = client.get(f"/messages/{bob.id}", headers=alice.headers).json()
    assert all(message["isRead"] for message in again if not message["isOwnMessage"])

    bob_view = client.get("/messages", headers=bob.headers).json()
    assert bob_view[0]["unreadCount"] == 1
    assert client.get("/messages/9999", headers=alice.headers).status_code == 404


def test_conversations_are_grouped_by_counterpart(client: TestClient, sign_in):
    alice = sign_in("alice")
    bob = sign_in("bob")
    carol = sign_in("carol")

    _send(client, bob, alice.id, "from bob 1")
    _send(client, bob, alice.id, "from bob 2")
    _send(client, alice, carol.id, "to carol")

    conversations = client.get("/messages", headers=alice.headers).json()

    assert [entry["id"] for entry in conversations] == [carol.id, bob.id]
    by_id = {entry["id"]: entry for entry in conversations}
    assert by_id[bob.id]["unreadCount"] == 2
    assert by_id[bob.id]["username"] == "bob"
    assert by_id[carol.id]["unreadCount"] == 0
    assert by_id[carol.id]["lastMessageAt"]

    _send(client, bob, alice.id, "from bob 3")
    reordered = client.get("/messages", headers=alice.headers).json()
    assert [entry["id"] for entry in reordered] == [bob.id, carol.id]
