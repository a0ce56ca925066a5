"""Message models for the contact desk API.

This module contains the Pydantic models for contact form submissions and
the admin inbox built on top of them.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, BeforeValidator, EmailStr, Field, field_validator
from typing_extensions import Annotated

from contactdesk.models.common import ApiResponse, CamelModel
from contactdesk.utils.helper_functions import parse_datetime


class MessageCategory(str, Enum):
    """Category chosen by the sender on the contact form."""

    GENERAL = "general"
    SUPPORT = "support"
    SALES = "sales"
    PARTNERSHIP = "partnership"
    COMPLAINT = "complaint"
    OTHER = "other"


class MessagePriority(str, Enum):
    """Triage priority of a message."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


Timestamp = Annotated[Optional[datetime], BeforeValidator(parse_datetime)]


class NoteAuthor(BaseModel):
    """Minimal projection of the admin who wrote a note."""

    id: Optional[str] = None
    email: Optional[str] = None


class MessageNote(CamelModel):
    """An admin annotation attached to a message.

    Attributes:
        id: Store assigned identifier
        content: Note text
        added_by: Author projection, or the bare user id when unresolved
        added_at: When the note was written
    """

    id: Optional[str] = None
    content: str
    added_by: Optional[NoteAuthor | str] = None
    added_at: Timestamp = None


class Message(CamelModel):
    """A contact form submission as stored in the inbox.

    Attributes:
        id: Store assigned UUID
        name: Sender name
        email: Sender email address
        phone: Optional sender phone number
        subject: Message subject
        message: Message body
        category: Sender selected category
        priority: Triage priority
        is_read: Whether an admin has read the message
        read_at: When the message was first read
        replied: Whether the message has been answered
        replied_at: When the message was first marked replied
        notes: Admin notes ordered oldest first
        ip_address: Address the submission came from
        user_agent: User agent of the submitting client
        created_at: When the message was received
    """

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    category: MessageCategory = MessageCategory.GENERAL
    priority: MessagePriority = MessagePriority.LOW
    is_read: bool = False
    read_at: Timestamp = None
    replied: bool = False
    replied_at: Timestamp = None
    notes: List[MessageNote] = []
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Timestamp = None

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, value):
        return value or []


class CreateMessageRequest(CamelModel):
    """Request model for public contact form submissions."""

    name: Annotated[str, Field(..., min_length=1, max_length=100, description="Sender name")]
    email: Annotated[EmailStr, Field(..., description="Email address for the reply")]
    subject: Annotated[str, Field(..., min_length=1, max_length=200, description="Message subject")]
    message: Annotated[str, Field(..., min_length=1, max_length=2000, description="Message body")]
    phone: Annotated[Optional[str], Field(None, max_length=20, description="Optional phone number")]
    category: Annotated[Optional[MessageCategory], Field(None, description="Optional message category")]

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class MessageReceipt(CamelModel):
    """What a sender gets back after submitting the contact form."""

    id: str
    name: str
    subject: str
    created_at: Timestamp = None


class UpdateMessageRequest(CamelModel):
    """Request model for admin status changes on a message."""

    is_read: Optional[bool] = None
    replied: Optional[bool] = None
    priority: Optional[MessagePriority] = None
    category: Optional[MessageCategory] = None


class AddNoteRequest(CamelModel):
    content: Annotated[str, Field(..., min_length=1, max_length=500, description="Note text (1-500 characters)")]


class MessageStats(CamelModel):
    """Inbox wide counters, independent of any list filter."""

    total: int = 0
    unread: int = 0
    unreplied: int = 0
    high_priority: int = 0


class Pagination(CamelModel):
    current: int
    pages: int
    total: int
    limit: int


class MessageListResponse(ApiResponse[List[Message]]):
    """Response model for a filtered page of the inbox."""

    pagination: Optional[Pagination] = None
    stats: Optional[MessageStats] = None
