"""Contact method endpoints for the contact desk API.

Reads are public; every mutation requires an admin.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from contactdesk.api.auth_guard import admin_guard
from contactdesk.models.common import ApiResponse
from contactdesk.models.contact import (
    ContactMethod,
    CreateContactMethodRequest,
    ReorderContactMethodsRequest,
    UpdateContactMethodRequest,
)
from contactdesk.services.contact_method_service import contact_method_registry

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"{action.capitalize()} contact method error: {str(e)}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server error while {action} contact method",
    )


@router.get(
    "",
    response_model=ApiResponse[List[ContactMethod]],
    response_model_exclude_none=True,
    summary="List contact methods",
    description="List contact methods sorted by display order. No authentication required.",
)
async def list_contact_methods(
    is_active: Optional[bool] = Query(
        None, alias="isActive", description="Only return active or inactive methods"
    ),
) -> ApiResponse[List[ContactMethod]]:
    try:
        methods = contact_method_registry.list_methods(is_active=is_active)
        return ApiResponse(success=True, data=methods)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Get contact methods error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching contact methods",
        )


@router.put(
    "/reorder",
    response_model=ApiResponse[List[ContactMethod]],
    response_model_exclude_none=True,
    summary="Reorder contact methods",
    description="Set the display order of several contact methods at once. Unknown ids are ignored.",
)
async def reorder_contact_methods(
    body: ReorderContactMethodsRequest,
    user=Depends(admin_guard),
) -> ApiResponse[List[ContactMethod]]:
    """
    Apply new display orders and return the full, re-sorted list.

    Args:
        body: The ``{id, order}`` pairs to apply
        user: The authenticated admin (injected by dependency)
    """
    try:
        methods = contact_method_registry.reorder_methods(body.orders)
        return ApiResponse(
            success=True,
            message="Contact methods reordered successfully",
            data=methods,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Reorder contact methods error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while reordering contact methods",
        )


@router.get(
    "/{contact_method_id}",
    response_model=ApiResponse[ContactMethod],
    response_model_exclude_none=True,
    summary="Get a contact method",
)
async def get_contact_method(contact_method_id: int) -> ApiResponse[ContactMethod]:
    try:
        method = contact_method_registry.get_method(contact_method_id)
        return ApiResponse(success=True, data=method)
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error("fetching", e)


@router.post(
    "",
    response_model=ApiResponse[ContactMethod],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a contact method",
)
async def create_contact_method(
    body: CreateContactMethodRequest,
    user=Depends(admin_guard),
) -> ApiResponse[ContactMethod]:
    """
    Create a contact method.

    ``description`` defaults to an empty string, ``isActive`` to true and
    ``order`` to the new id.
    """
    try:
        method = contact_method_registry.create_method(body)
        return ApiResponse(
            success=True,
            message="Contact method created successfully",
            data=method,
        )
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error("creating", e)


@router.put(
    "/{contact_method_id}",
    response_model=ApiResponse[ContactMethod],
    response_model_exclude_none=True,
    summary="Update a contact method",
)
async def update_contact_method(
    contact_method_id: int,
    body: UpdateContactMethodRequest,
    user=Depends(admin_guard),
) -> ApiResponse[ContactMethod]:
    try:
        method = contact_method_registry.update_method(contact_method_id, body)
        return ApiResponse(
            success=True,
            message="Contact method updated successfully",
            data=method,
        )
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error("updating", e)


@router.delete(
    "/{contact_method_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    summary="Delete a contact method",
)
async def delete_contact_method(
    contact_method_id: int,
    user=Depends(admin_guard),
) -> ApiResponse:
    try:
        contact_method_registry.delete_method(contact_method_id)
        return ApiResponse(success=True, message="Contact method deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error("deleting", e)


@router.put(
    "/{contact_method_id}/toggle",
    response_model=ApiResponse[ContactMethod],
    response_model_exclude_none=True,
    summary="Toggle a contact method",
    description="Flip whether a contact method is active.",
)
async def toggle_contact_method(
    contact_method_id: int,
    user=Depends(admin_guard),
) -> ApiResponse[ContactMethod]:
    try:
        method, state = contact_method_registry.toggle_method(contact_method_id)
        return ApiResponse(
            success=True,
            message=f"Contact method {state} successfully",
            data=method,
        )
    except HTTPException:
        raise
    except Exception as e:
        raise _server_error("toggling", e)
