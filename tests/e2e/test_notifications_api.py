"""End-to-end tests for comment notifications."""


def _post_comment(client, video, user, content, parent_id=None):
    body = {"content": content}
    if parent_id:
        body["parentId"] = parent_id
    response = client.post(
        f"/videos/{video.id}/comments", json=body, headers=user.headers
    )
    return response.json()["data"]


class TestNotificationEndpoints:
    """End-to-end tests for polling and acknowledging notifications."""

    def test_reply_notifies_parent_author(self, client, video, alice, bob):
        # Arrange
        parent = _post_comment(client, video, alice, "Question?")
        reply = _post_comment(client, video, bob, "Answer", parent["id"])

        # Act
        response = client.get("/notifications/comments", headers=alice.headers)

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["notifications"]) == 1
        notification = data["notifications"][0]
        assert notification["type"] == "reply"
        assert notification["commentId"] == reply["id"]
        assert notification["read"] is False
        assert data["pagination"]["hasMore"] is False

    def test_self_reply_does_not_notify(self, client, video, alice):
        parent = _post_comment(client, video, alice, "Question?")
        _post_comment(client, video, alice, "Answering myself", parent["id"])

        response = client.get("/notifications/comments", headers=alice.headers)

        assert response.json()["data"]["notifications"] == []

    def test_pin_notifies_author(self, client, video, owner, alice):
        comment = _post_comment(client, video, alice, "Great video")
        client.post(
            f"/videos/{video.id}/comments/{comment['id']}/pin", headers=owner.headers
        )

        response = client.get("/notifications/comments", headers=alice.headers)

        types = [n["type"] for n in response.json()["data"]["notifications"]]
        assert types == ["pinned"]

    def test_mark_read_and_filter_unread(self, client, video, alice, bob):
        # Arrange
        parent = _post_comment(client, video, alice, "Question?")
        _post_comment(client, video, bob, "Answer", parent["id"])
        listed = client.get("/notifications/comments", headers=alice.headers)
        notification_id = listed.json()["data"]["notifications"][0]["id"]

        # Act
        marked = client.put(
            "/notifications/comments",
            json={"notificationId": notification_id},
            headers=alice.headers,
        )
        unread = client.get(
            "/notifications/comments?unreadOnly=true", headers=alice.headers
        )

        # Assert
        assert marked.status_code == 200
        assert marked.json()["data"]["read"] is True
        assert unread.json()["data"]["notifications"] == []

    def test_cannot_mark_other_users_notification(self, client, video, alice, bob):
        parent = _post_comment(client, video, alice, "Question?")
        _post_comment(client, video, bob, "Answer", parent["id"])
        listed = client.get("/notifications/comments", headers=alice.headers)
        notification_id = listed.json()["data"]["notifications"][0]["id"]

        response = client.put(
            "/notifications/comments",
            json={"notificationId": notification_id},
            headers=bob.headers,
        )

        assert response.status_code == 403

    def test_notifications_require_auth(self, client):
        response = client.get("/notifications/comments")

        assert response.status_code == 401
