"""Message inbox endpoints for the contact desk API.

This module contains FastAPI routes for public contact form submissions and
the admin inbox used to triage them.
"""

import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from contactdesk.api.auth_guard import admin_guard
from contactdesk.models.common import ApiResponse
from contactdesk.models.message import (
    AddNoteRequest,
    CreateMessageRequest,
    Message,
    MessageCategory,
    MessageListResponse,
    MessagePriority,
    MessageReceipt,
    UpdateMessageRequest,
)
from contactdesk.services.message_service import message_service
from contactdesk.utils.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from contactdesk.utils.helper_functions import get_client_ip

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=MessageListResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="List messages",
    description="Filtered, paginated inbox with stats for the whole inbox. Admin only.",
)
async def list_messages(
    user=Depends(admin_guard),
    page: int = Query(1, ge=1, description="Current page number defaults to 1"),
    limit: int = Query(
        DEFAULT_PAGE_LIMIT,
        ge=1,
        le=MAX_PAGE_LIMIT,
        description="Number of messages per page, between 1 and 100",
    ),
    category: Optional[MessageCategory] = Query(None, description="Filter by category"),
    priority: Optional[MessagePriority] = Query(None, description="Filter by priority"),
    search: Optional[str] = Query(None, max_length=100, description="Full-text search term"),
    is_read: Optional[bool] = Query(None, alias="isRead", description="Filter by read state"),
    replied: Optional[bool] = Query(None, description="Filter by reply state"),
) -> MessageListResponse:
    """
    Retrieve a page of the inbox, newest first.

    Pagination reflects the filters; ``stats`` always covers the whole inbox.
    """
    try:
        return await message_service.list_messages(
            page=page,
            limit=limit,
            category=category,
            priority=priority,
            is_read=is_read,
            replied=replied,
            search=search,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Get messages error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching messages",
        )


@router.get(
    "/{message_id}",
    response_model=ApiResponse[Message],
    response_model_exclude_none=True,
    summary="Get a message",
    description="Retrieve one message. Opening an unread message marks it read. Admin only.",
)
async def get_message(message_id: str, user=Depends(admin_guard)) -> ApiResponse[Message]:
    try:
        message = await message_service.get_message(message_id)
        return ApiResponse(success=True, data=message)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Get message error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching message",
        )


@router.post(
    "",
    response_model=ApiResponse[MessageReceipt],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
    description="Submit a message from the public contact form. No authentication required.",
)
async def create_message(
    body: CreateMessageRequest, http_request: Request
) -> ApiResponse[MessageReceipt]:
    """
    Store a contact form submission.

    The response only echoes the id, name, subject and creation time of the
    stored message.
    """
    try:
        receipt = await message_service.create_message(
            body,
            ip_address=get_client_ip(http_request),
            user_agent=http_request.headers.get("user-agent"),
        )
        return ApiResponse(
            success=True,
            message="Message sent successfully. We will get back to you soon!",
            data=receipt,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Create message error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while sending message",
        )


@router.put(
    "/{message_id}/mark-read",
    response_model=ApiResponse[Message],
    response_model_exclude_none=True,
    summary="Mark a message as read",
)
async def mark_message_read(message_id: str, user=Depends(admin_guard)) -> ApiResponse[Message]:
    try:
        message = await message_service.mark_as_read(message_id)
        return ApiResponse(success=True, message="Message marked as read", data=message)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Mark read error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while marking message as read",
        )


@router.put(
    "/{message_id}",
    response_model=ApiResponse[Message],
    response_model_exclude_none=True,
    summary="Update message status",
    description="Change the read, replied, priority or category of a message. Admin only.",
)
async def update_message(
    message_id: str,
    body: UpdateMessageRequest,
    user=Depends(admin_guard),
) -> ApiResponse[Message]:
    try:
        message = await message_service.update_message(message_id, body)
        return ApiResponse(success=True, message="Message updated successfully", data=message)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Update message error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while updating message",
        )


@router.post(
    "/{message_id}/notes",
    response_model=ApiResponse[Message],
    response_model_exclude_none=True,
    summary="Add a note to a message",
)
async def add_message_note(
    message_id: str,
    body: AddNoteRequest,
    user=Depends(admin_guard),
) -> ApiResponse[Message]:
    """
    Append an admin note. The acting admin is recorded as the author.
    """
    try:
        message = await message_service.add_note(
            message_id, content=body.content, added_by=user["sub"]
        )
        return ApiResponse(success=True, message="Note added successfully", data=message)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Add note error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while adding note",
        )


@router.delete(
    "/{message_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Delete a message",
)
async def delete_message(message_id: str, user=Depends(admin_guard)) -> ApiResponse:
    try:
        await message_service.delete_message(message_id)
        return ApiResponse(success=True, message="Message deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Delete message error: {str(e)}")
        traceback.print_exc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while deleting message",
        )
