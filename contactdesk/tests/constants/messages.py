from enum import Enum

from contactdesk.tests.constants.user import UserTestConstants


class MessageTestConstants(Enum):
    MOCK_MESSAGE_ID = "3f2c8a9e-1d4b-4c6a-9e7f-0a1b2c3d4e5f"
    MOCK_UNKNOWN_MESSAGE_ID = "00000000-0000-4000-8000-000000000000"
    MOCK_CREATED_AT = "2025-05-14T18:42:34.623132+00:00"
    MOCK_READ_AT = "2025-05-15T09:00:00+00:00"
    MOCK_NOTE_ADDED_AT = "2025-05-15T09:05:00+00:00"


def get_message_row(**overrides) -> dict:
    """Build a ``messages`` row as the store returns it."""
    row = {
        "id": MessageTestConstants.MOCK_MESSAGE_ID.value,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": None,
        "subject": "General question",
        "message": "hello",
        "category": "general",
        "priority": "low",
        "is_read": False,
        "read_at": None,
        "replied": False,
        "replied_at": None,
        "ip_address": "203.0.113.7",
        "user_agent": "Mozilla/5.0",
        "created_at": MessageTestConstants.MOCK_CREATED_AT.value,
        "updated_at": MessageTestConstants.MOCK_CREATED_AT.value,
        "notes": [],
    }
    row.update(overrides)
    return row


def get_note_row(content: str = "Called back", added_at: str = None) -> dict:
    return {
        "id": "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d",
        "content": content,
        "added_at": added_at or MessageTestConstants.MOCK_NOTE_ADDED_AT.value,
        "added_by": {
            "id": UserTestConstants.MOCK_ADMIN_ID.value,
            "email": UserTestConstants.MOCK_ADMIN_EMAIL.value,
        },
    }
