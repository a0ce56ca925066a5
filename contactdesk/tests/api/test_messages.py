import pytest
from fastapi import HTTPException
from contactdesk.core.config import settings
from contactdesk.models.message import (
    Message,
    MessageCategory,
    MessageListResponse,
    MessagePriority,
    MessageReceipt,
    MessageStats,
    Pagination,
)
from contactdesk.tests.constants.messages import (
    MessageTestConstants,
    get_message_row,
    get_note_row,
)
from contactdesk.tests.constants.user import UserTestConstants

MESSAGES_URL = f"{settings.API_PREFIX}/messages"
MESSAGE_ID = MessageTestConstants.MOCK_MESSAGE_ID.value


@pytest.mark.asyncio
class TestMessagesEndpoint:

    async def test_create_message_returns_receipt_only(
        self, client, mock_message_service_create
    ):
        mock_message_service_create.return_value = MessageReceipt(
            id=MESSAGE_ID,
            name="A",
            subject="General question",
            created_at=MessageTestConstants.MOCK_CREATED_AT.value,
        )

        response = client.post(
            MESSAGES_URL,
            json={"name": "A", "email": "A@X.com", "subject": "General question", "message": "hello"},
            headers={"User-Agent": "pytest-agent", "X-Forwarded-For": "198.51.100.4, 10.0.0.1"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Message sent successfully. We will get back to you soon!"
        assert set(body["data"]) == {"id", "name", "subject", "createdAt"}
        assert body["data"]["id"] == MESSAGE_ID

        request = mock_message_service_create.call_args.args[0]
        assert request.email == "a@x.com"
        assert request.category is None
        assert mock_message_service_create.call_args.kwargs == {
            "ip_address": "198.51.100.4",
            "user_agent": "pytest-agent",
        }

    async def test_create_message_reports_every_invalid_field(
        self, client, mock_message_service_create
    ):
        response = client.post(
            MESSAGES_URL,
            json={
                "name": "   ",
                "email": "not-an-email",
                "message": "x" * 2001,
                "phone": "1" * 21,
                "category": "spam",
            },
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"name", "email", "subject", "message", "phone", "category"}
        mock_message_service_create.assert_not_called()

    async def test_list_messages_requires_admin(self, client):
        response = client.get(MESSAGES_URL)

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized"}

    async def test_list_messages_success(self, admin_client, mock_message_service_list):
        mock_message_service_list.return_value = MessageListResponse(
            success=True,
            data=[Message(**get_message_row())],
            pagination=Pagination(current=2, pages=3, total=21, limit=10),
            stats=MessageStats(total=40, unread=5, unreplied=7, high_priority=3),
        )

        response = admin_client.get(
            MESSAGES_URL,
            params={
                "page": 2,
                "category": "support",
                "priority": "high",
                "isRead": "false",
                "search": "refund",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"current": 2, "pages": 3, "total": 21, "limit": 10}
        assert body["stats"] == {"total": 40, "unread": 5, "unreplied": 7, "highPriority": 3}
        assert body["data"][0]["isRead"] is False
        assert "readAt" not in body["data"][0]

        mock_message_service_list.assert_called_once_with(
            page=2,
            limit=10,
            category=MessageCategory.SUPPORT,
            priority=MessagePriority.HIGH,
            is_read=False,
            replied=None,
            search="refund",
        )

    async def test_list_messages_reports_every_invalid_query_param(
        self, admin_client, mock_message_service_list
    ):
        response = admin_client.get(
            MESSAGES_URL,
            params={
                "page": 0,
                "limit": 101,
                "category": "spam",
                "priority": "urgent",
                "search": "s" * 101,
            },
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert {error["field"] for error in errors} == {
            "page",
            "limit",
            "category",
            "priority",
            "search",
        }
        assert all(error["location"] == "query" for error in errors)
        mock_message_service_list.assert_not_called()

    async def test_get_message_marks_read(self, admin_client, mock_message_service_get):
        mock_message_service_get.return_value = Message(
            **get_message_row(
                is_read=True,
                read_at=MessageTestConstants.MOCK_READ_AT.value,
                notes=[get_note_row()],
            )
        )

        response = admin_client.get(f"{MESSAGES_URL}/{MESSAGE_ID}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["isRead"] is True
        assert data["readAt"].startswith("2025-05-15T09:00:00")
        assert data["notes"][0]["addedBy"] == {
            "id": UserTestConstants.MOCK_ADMIN_ID.value,
            "email": UserTestConstants.MOCK_ADMIN_EMAIL.value,
        }
        mock_message_service_get.assert_called_once_with(MESSAGE_ID)

    async def test_get_message_malformed_id(self, admin_client):
        response = admin_client.get(f"{MESSAGES_URL}/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid message ID"}

    async def test_get_message_not_found(self, admin_client, mock_message_service_get):
        mock_message_service_get.side_effect = HTTPException(
            status_code=404, detail="Message not found"
        )

        response = admin_client.get(f"{MESSAGES_URL}/{MESSAGE_ID}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Message not found"}

    async def test_get_message_store_failure_is_generic(
        self, admin_client, mock_message_service_get
    ):
        mock_message_service_get.side_effect = RuntimeError("connection reset")

        response = admin_client.get(f"{MESSAGES_URL}/{MESSAGE_ID}")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Server error while fetching message",
        }

    async def test_update_message(self, admin_client, mock_message_service_update):
        mock_message_service_update.return_value = Message(
            **get_message_row(replied=True, replied_at=MessageTestConstants.MOCK_READ_AT.value)
        )

        response = admin_client.put(
            f"{MESSAGES_URL}/{MESSAGE_ID}",
            json={"replied": True, "priority": "medium"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Message updated successfully"
        message_id, request = mock_message_service_update.call_args.args
        assert message_id == MESSAGE_ID
        assert request.replied is True
        assert request.priority == MessagePriority.MEDIUM
        assert request.is_read is None

    async def test_update_message_rejects_invalid_values(
        self, admin_client, mock_message_service_update
    ):
        response = admin_client.put(
            f"{MESSAGES_URL}/{MESSAGE_ID}",
            json={"isRead": "maybe", "priority": "critical", "category": "spam"},
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"isRead", "priority", "category"}
        mock_message_service_update.assert_not_called()

    async def test_add_note_records_acting_admin(
        self, admin_client, mock_message_service_add_note
    ):
        mock_message_service_add_note.return_value = Message(
            **get_message_row(notes=[get_note_row("Refund issued")])
        )

        response = admin_client.post(
            f"{MESSAGES_URL}/{MESSAGE_ID}/notes", json={"content": "  Refund issued  "}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Note added successfully"
        assert response.json()["data"]["notes"][0]["content"] == "Refund issued"
        mock_message_service_add_note.assert_called_once_with(
            MESSAGE_ID,
            content="Refund issued",
            added_by=UserTestConstants.MOCK_ADMIN_ID.value,
        )

    async def test_add_note_rejects_long_content(
        self, admin_client, mock_message_service_add_note
    ):
        response = admin_client.post(
            f"{MESSAGES_URL}/{MESSAGE_ID}/notes", json={"content": "n" * 501}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "content"
        mock_message_service_add_note.assert_not_called()

    async def test_delete_message(self, admin_client, mock_message_service_delete):
        response = admin_client.delete(f"{MESSAGES_URL}/{MESSAGE_ID}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Message deleted successfully"}
        mock_message_service_delete.assert_called_once_with(MESSAGE_ID)

    async def test_mark_read(self, admin_client, mock_message_service_mark_read):
        mock_message_service_mark_read.return_value = Message(
            **get_message_row(is_read=True, read_at=MessageTestConstants.MOCK_READ_AT.value)
        )

        response = admin_client.put(f"{MESSAGES_URL}/{MESSAGE_ID}/mark-read")

        assert response.status_code == 200
        assert response.json()["message"] == "Message marked as read"
        assert response.json()["data"]["isRead"] is True
        mock_message_service_mark_read.assert_called_once_with(MESSAGE_ID)
