"""End-to-end tests for reports and bulk moderation."""

from uuid import uuid4


def _post_comment(client, video, user, content):
    response = client.post(
        f"/videos/{video.id}/comments", json={"content": content}, headers=user.headers
    )
    return response.json()["data"]


class TestReportEndpoints:
    """End-to-end tests for reporting comments."""

    def test_report_comment_returns_201(self, client, video, alice, bob):
        # Arrange
        comment = _post_comment(client, video, alice, "Buy cheap watches")

        # Act
        response = client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={"reason": "spam", "description": "Advertising"},
            headers=bob.headers,
        )

        # Assert
        assert response.status_code == 201
        report = response.json()["data"]
        assert report["commentId"] == comment["id"]
        assert report["reporterId"] == bob.id
        assert report["reason"] == "spam"
        assert report["status"] == "pending"

    def test_invalid_reason_is_400(self, client, video, alice, bob):
        comment = _post_comment(client, video, alice, "Hello")

        response = client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={"reason": "boring"},
            headers=bob.headers,
        )

        assert response.status_code == 400
        assert "Invalid report reason" in response.json()["error"]

    def test_missing_reason_is_400(self, client, video, alice, bob):
        comment = _post_comment(client, video, alice, "Hello")

        response = client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={},
            headers=bob.headers,
        )

        assert response.status_code == 400

    def test_report_requires_auth(self, client, video, alice):
        comment = _post_comment(client, video, alice, "Hello")

        response = client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={"reason": "spam"},
        )

        assert response.status_code == 401

    def test_owner_lists_reports(self, client, video, owner, alice, bob):
        # Arrange
        comment = _post_comment(client, video, alice, "Hello")
        client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={"reason": "harassment"},
            headers=bob.headers,
        )

        # Act
        response = client.get(
            f"/videos/{video.id}/comments/reports", headers=owner.headers
        )
        pending = client.get(
            f"/videos/{video.id}/comments/reports?status=pending",
            headers=owner.headers,
        )
        dismissed = client.get(
            f"/videos/{video.id}/comments/reports?status=dismissed",
            headers=owner.headers,
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert [r["reason"] for r in data["reports"]] == ["harassment"]
        assert data["pagination"]["total"] == 1
        assert len(pending.json()["data"]["reports"]) == 1
        assert dismissed.json()["data"]["reports"] == []

    def test_non_owner_cannot_list_reports(self, client, video, alice):
        response = client.get(
            f"/videos/{video.id}/comments/reports", headers=alice.headers
        )

        assert response.status_code == 403


class TestReviewReportEndpoint:
    """End-to-end tests for the owner's report review."""

    def _report(self, client, video, alice, bob):
        comment = _post_comment(client, video, alice, "Hello")
        response = client.post(
            f"/videos/{video.id}/comments/{comment['id']}/report",
            json={"reason": "spam"},
            headers=bob.headers,
        )
        return response.json()["data"]

    def test_owner_dismisses_report(self, client, video, owner, alice, bob):
        # Arrange
        report = self._report(client, video, alice, bob)

        # Act
        response = client.put(
            f"/videos/{video.id}/comments/reports/{report['id']}",
            json={"status": "dismissed"},
            headers=owner.headers,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["id"] == report["id"]
        assert response.json()["data"]["status"] == "dismissed"
        dismissed = client.get(
            f"/videos/{video.id}/comments/reports?status=dismissed",
            headers=owner.headers,
        )
        pending = client.get(
            f"/videos/{video.id}/comments/reports?status=pending",
            headers=owner.headers,
        )
        assert [r["id"] for r in dismissed.json()["data"]["reports"]] == [report["id"]]
        assert pending.json()["data"]["reports"] == []

    def test_review_by_non_owner_is_403(self, client, video, alice, bob):
        report = self._report(client, video, alice, bob)

        response = client.put(
            f"/videos/{video.id}/comments/reports/{report['id']}",
            json={"status": "reviewed"},
            headers=bob.headers,
        )

        assert response.status_code == 403

    def test_review_back_to_pending_is_400(self, client, video, owner, alice, bob):
        report = self._report(client, video, alice, bob)

        response = client.put(
            f"/videos/{video.id}/comments/reports/{report['id']}",
            json={"status": "pending"},
            headers=owner.headers,
        )

        assert response.status_code == 400

    def test_unknown_status_is_422(self, client, video, owner, alice, bob):
        report = self._report(client, video, alice, bob)

        response = client.put(
            f"/videos/{video.id}/comments/reports/{report['id']}",
            json={"status": "ignored"},
            headers=owner.headers,
        )

        assert response.status_code == 422

    def test_unknown_report_is_404(self, client, video, owner):
        response = client.put(
            f"/videos/{video.id}/comments/reports/{uuid4()}",
            json={"status": "reviewed"},
            headers=owner.headers,
        )

        assert response.status_code == 404

    def test_review_requires_auth(self, client, video, alice, bob):
        report = self._report(client, video, alice, bob)

        response = client.put(
            f"/videos/{video.id}/comments/reports/{report['id']}",
            json={"status": "reviewed"},
        )

        assert response.status_code == 401


class TestBulkModerationEndpoint:
    """End-to-end tests for bulk moderation."""

    def test_bulk_hide_reports_each_item(self, client, video, owner, alice, bob):
        # Arrange
        first = _post_comment(client, video, alice, "One")
        second = _post_comment(client, video, bob, "Two")
        missing = str(uuid4())

        # Act
        response = client.post(
            "/moderation/comments/bulk",
            json={
                "commentIds": [first["id"], missing, second["id"], "not-a-uuid"],
                "action": "hide",
            },
            headers=owner.headers,
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["action"] == "hide"
        assert data["succeeded"] == 2
        assert data["failed"] == 2
        outcomes = {r["commentId"]: r["success"] for r in data["results"]}
        assert outcomes == {
            first["id"]: True,
            missing: False,
            second["id"]: True,
            "not-a-uuid": False,
        }

        public = client.get(f"/videos/{video.id}/comments").json()["data"]
        assert public["comments"] == []

    def test_bulk_by_non_owner_fails_per_item(self, client, video, alice):
        comment = _post_comment(client, video, alice, "Mine")

        response = client.post(
            "/moderation/comments/bulk",
            json={"commentIds": [comment["id"]], "action": "delete"},
            headers=alice.headers,
        )

        assert response.status_code == 200
        result = response.json()["data"]["results"][0]
        assert result["success"] is False
        assert result["error"]

    def test_bulk_rejects_empty_list(self, client, owner):
        response = client.post(
            "/moderation/comments/bulk",
            json={"commentIds": [], "action": "hide"},
            headers=owner.headers,
        )

        assert response.status_code == 422

    def test_bulk_rejects_unknown_action(self, client, owner):
        response = client.post(
            "/moderation/comments/bulk",
            json={"commentIds": [str(uuid4())], "action": "ban"},
            headers=owner.headers,
        )

        assert response.status_code == 422
