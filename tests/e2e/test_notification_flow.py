"""End-to-end tests for notifications and the realtime channel."""

import pytest
from starlette.websockets import WebSocketDisconnect

from tests.e2e.helpers import ask_question, bearer, post_answer, register


class TestNotificationEndpoints:
    """End-to-end tests for /notifications."""

    def test_answer_notifies_asker(self, client):
        """Answers should land in the asker's inbox as unread."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        answer = post_answer(client, answerer_token, question["id"])

        # Act
        inbox = client.get("/notifications", headers=bearer(asker_token))
        count = client.get("/notifications/unread-count", headers=bearer(asker_token))

        # Assert
        body = inbox.json()
        assert body["unreadCount"] == 1
        assert count.json() == {"unreadCount": 1}
        notification = body["notifications"][0]
        assert notification["type"] == "answer_received"
        assert notification["answerId"] == answer["id"]
        assert notification["sender"]["username"] == "answerer"

    def test_mark_read_and_clear(self, client):
        """Read state changes should be reflected in the unread count."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        post_answer(client, answerer_token, question["id"])
        inbox = client.get("/notifications", headers=bearer(asker_token)).json()
        notification_id = inbox["notifications"][0]["id"]

        # Act
        read = client.put(
            f"/notifications/{notification_id}/read", headers=bearer(asker_token)
        )
        unread_only = client.get(
            "/notifications",
            params={"unreadOnly": "true"},
            headers=bearer(asker_token),
        )
        cleared = client.delete(
            "/notifications/clear-all", headers=bearer(asker_token)
        )

        # Assert
        assert read.json()["notification"]["isRead"] is True
        assert unread_only.json()["notifications"] == []
        assert cleared.json()["deletedCount"] == 1

    def test_cannot_touch_others_notifications(self, client):
        """Notifications of another user should be off limits."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        post_answer(client, answerer_token, question["id"])
        inbox = client.get("/notifications", headers=bearer(asker_token)).json()
        notification_id = inbox["notifications"][0]["id"]

        # Act
        response = client.delete(
            f"/notifications/{notification_id}", headers=bearer(answerer_token)
        )

        # Assert
        assert response.status_code == 403

    def test_notification_types(self, client):
        """The type catalogue should list every kind."""
        # Act
        response = client.get("/notifications/types")

        # Assert
        assert "answer_received" in response.json()
        assert "user_banned" in response.json()


class TestRealtimeChannel:
    """End-to-end tests for the notification WebSocket."""

    def test_push_on_answer(self, client):
        """Connected askers should receive new answers as they happen."""
        # Arrange
        asker_id, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)

        with client.websocket_connect(
            f"/ws/notifications?token={asker_token}"
        ) as websocket:
            connected = websocket.receive_json()

            # Act
            post_answer(client, answerer_token, question["id"])
            frame = websocket.receive_json()

        # Assert
        assert connected == {"event": "connected", "data": {"userId": asker_id}}
        assert frame["event"] == "answer_received"
        assert frame["data"]["type"] == "answer_received"

    def test_rejects_invalid_token(self, client):
        """Connections without a valid token should be closed."""
        # Act & Assert
        with pytest.raises(WebSocketDisconnect):
            with client.websocket_connect("/ws/notifications?token=garbage"):
                pass
