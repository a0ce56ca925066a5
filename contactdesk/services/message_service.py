"""Services for the contact form inbox.

Messages live in the ``messages`` table and their admin notes in
``message_notes``. Reads embed each note's author as a ``{id, email}``
projection from ``user_profiles``.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

from contactdesk.core.config import settings
from contactdesk.models.message import (
    CreateMessageRequest,
    Message,
    MessageCategory,
    MessageListResponse,
    MessagePriority,
    MessageReceipt,
    MessageStats,
    Pagination,
    UpdateMessageRequest,
)
from contactdesk.services.supabase_service import SupabaseService, supabase_service
from contactdesk.utils.constants import DEFAULT_PAGE_LIMIT, HIGH_PRIORITY_KEYWORDS
from contactdesk.utils.helper_functions import is_valid_uuid, utc_now_iso

logger = logging.getLogger(__name__)

MESSAGE_WITH_NOTES = (
    "*, notes:{notes_table}(id, content, added_at, added_by:{profiles_table}(id, email))"
)


def assign_priority(
    subject: str, message: str, category: Optional[MessageCategory] = None
) -> Optional[MessagePriority]:
    """Work out the triage priority of a new message.

    Any high priority keyword in the subject or body wins, then the
    category decides. ``None`` leaves the store default in place.
    """
    text = f"{subject} {message}".lower()
    if any(keyword in text for keyword in HIGH_PRIORITY_KEYWORDS):
        return MessagePriority.HIGH
    if category == MessageCategory.COMPLAINT:
        return MessagePriority.HIGH
    if category in (MessageCategory.SALES, MessageCategory.PARTNERSHIP):
        return MessagePriority.MEDIUM
    return None


class MessageService:
    """Service for the admin message inbox."""

    def __init__(self, db: Optional[SupabaseService] = None):
        self.db = db or supabase_service
        self.table = settings.MESSAGES_TABLE
        self.notes_table = settings.MESSAGE_NOTES_TABLE
        self.select_query = MESSAGE_WITH_NOTES.format(
            notes_table=self.notes_table,
            profiles_table=settings.USER_PROFILES_TABLE,
        )

    @staticmethod
    def _validate_id(message_id: str) -> None:
        if not is_valid_uuid(message_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid message ID",
            )

    @staticmethod
    def _to_message(row: Dict[str, Any]) -> Message:
        notes = row.get("notes") or []
        row = {**row, "notes": sorted(notes, key=lambda note: note.get("added_at") or "")}
        return Message(**row)

    def _fetch(self, message_id: str) -> Message:
        rows = self.db.select_data(
            self.table, query=self.select_query, cols={"id": message_id}
        )
        if not rows:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Message not found",
            )
        return self._to_message(rows[0])

    def _stamp_first_transition(self, message_id: str, column: str) -> None:
        # Only rows whose timestamp is still null are touched
        self.db.update_data(
            self.table,
            {column: utc_now_iso()},
            cols={"id": message_id},
            null_cols=[column],
        )

    def _mark_read(self, message: Message) -> Message:
        if message.is_read:
            return message
        self.db.update_data(self.table, {"is_read": True}, cols={"id": message.id})
        self._stamp_first_transition(message.id, "read_at")
        logger.info(f"Message {message.id} marked as read")
        return self._fetch(message.id)

    def get_stats(self) -> MessageStats:
        """Count the whole inbox, ignoring any list filters."""
        return MessageStats(
            total=self.db.count_data(self.table),
            unread=self.db.count_data(self.table, cols={"is_read": False}),
            unreplied=self.db.count_data(self.table, cols={"replied": False}),
            high_priority=self.db.count_data(
                self.table, cols={"priority": MessagePriority.HIGH.value}
            ),
        )

    async def list_messages(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        category: Optional[MessageCategory] = None,
        priority: Optional[MessagePriority] = None,
        is_read: Optional[bool] = None,
        replied: Optional[bool] = None,
        search: Optional[str] = None,
    ) -> MessageListResponse:
        """
        Retrieve a filtered page of the inbox, newest first.

        Args:
            page (int): 1-based page number.
            limit (int): Page size.
            category (Optional[MessageCategory]): Only messages in this category.
            priority (Optional[MessagePriority]): Only messages with this priority.
            is_read (Optional[bool]): Only read or only unread messages.
            replied (Optional[bool]): Only replied or only unreplied messages.
            search (Optional[str]): Full-text query over name, subject and body.

        Returns:
            MessageListResponse: The page, pagination for the filtered set and
            stats for the whole inbox.
        """
        cols: Dict[str, Any] = {}
        if category:
            cols["category"] = category.value
        if priority:
            cols["priority"] = priority.value
        if is_read is not None:
            cols["is_read"] = is_read
        if replied is not None:
            cols["replied"] = replied
        text_search = {"column": "fts", "query": search} if search else None

        rows = self.db.select_data(
            self.table,
            query=self.select_query,
            cols=cols,
            text_search=text_search,
            order_by="created_at",
            desc=True,
            offset=(page - 1) * limit,
            limit=limit,
        )
        total = self.db.count_data(self.table, cols=cols, text_search=text_search)
        stats = self.get_stats()

        logger.info(
            f"Retrieved {len(rows)} of {total} messages (page {page}, filters {cols}, search {search!r})"
        )
        return MessageListResponse(
            success=True,
            data=[self._to_message(row) for row in rows],
            pagination=Pagination(
                current=page,
                pages=math.ceil(total / limit),
                total=total,
                limit=limit,
            ),
            stats=stats,
        )

    async def get_message(self, message_id: str) -> Message:
        """
        Retrieve one message, marking it read the first time it is opened.

        Raises:
            HTTPException: 400 for a malformed id, 404 if the message does not exist.
        """
        self._validate_id(message_id)
        return self._mark_read(self._fetch(message_id))

    async def mark_as_read(self, message_id: str) -> Message:
        """Mark a message read. Calling it again changes nothing."""
        self._validate_id(message_id)
        return self._mark_read(self._fetch(message_id))

    async def create_message(
        self,
        request: CreateMessageRequest,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> MessageReceipt:
        """
        Store a contact form submission.

        Args:
            request: Validated contact form data
            ip_address: Address the submission came from
            user_agent: User agent of the submitting client

        Returns:
            A receipt with the id, name, subject and creation time only
        """
        message_data: Dict[str, Any] = {
            "name": request.name,
            "email": request.email,
            "subject": request.subject,
            "message": request.message,
            "ip_address": ip_address,
            "user_agent": user_agent,
        }
        if request.phone:
            message_data["phone"] = request.phone
        if request.category:
            message_data["category"] = request.category.value

        priority = assign_priority(request.subject, request.message, request.category)
        if priority:
            message_data["priority"] = priority.value

        rows = self.db.insert_data(self.table, message_data)
        if not rows:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Server error while sending message",
            )
        saved = rows[0]
        logger.info(
            f"Message {saved.get('id')} received (priority {saved.get('priority')})"
        )
        return MessageReceipt(
            id=saved["id"],
            name=saved["name"],
            subject=saved["subject"],
            created_at=saved.get("created_at"),
        )

    async def update_message(
        self, message_id: str, request: UpdateMessageRequest
    ) -> Message:
        """
        Apply admin status changes to a message.

        ``read_at`` and ``replied_at`` are written the first time their flag
        turns true and are kept if the flag is later turned off.

        Raises:
            HTTPException: 400 for a malformed id, 404 if the message does not exist.
        """
        self._validate_id(message_id)
        self._fetch(message_id)

        changes: Dict[str, Any] = {}
        if request.is_read is not None:
            changes["is_read"] = request.is_read
        if request.replied is not None:
            changes["replied"] = request.replied
        if request.priority:
            changes["priority"] = request.priority.value
        if request.category:
            changes["category"] = request.category.value

        if changes:
            self.db.update_data(self.table, changes, cols={"id": message_id})
        if request.is_read:
            self._stamp_first_transition(message_id, "read_at")
        if request.replied:
            self._stamp_first_transition(message_id, "replied_at")

        logger.info(f"Message {message_id} updated: {sorted(changes)}")
        return self._fetch(message_id)

    async def add_note(self, message_id: str, content: str, added_by: str) -> Message:
        """
        Append an admin note to a message.

        Args:
            message_id: Message to annotate
            content: Note text
            added_by: Id of the acting admin

        Returns:
            The message with every note and its author resolved
        """
        self._validate_id(message_id)
        self._fetch(message_id)

        self.db.insert_data(
            self.notes_table,
            {
                "message_id": message_id,
                "content": content,
                "added_by": added_by,
                "added_at": utc_now_iso(),
            },
        )
        logger.info(f"Note added to message {message_id} by {added_by}")
        return self._fetch(message_id)

    async def delete_message(self, message_id: str) -> None:
        """
        Delete a message and, through the foreign key, its notes.

        Raises:
            HTTPException: 400 for a malformed id, 404 if the message does not exist.
        """
        self._validate_id(message_id)
        self._fetch(message_id)
        self.db.delete_data(self.table, cols={"id": message_id})
        logger.info(f"Message {message_id} deleted")


message_service = MessageService()
