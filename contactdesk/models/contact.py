"""Contact method models for the contact desk API.

This module contains the Pydantic models for the admin-managed list of
ways to reach the organization.
"""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import Field

from contactdesk.models.common import CamelModel


class ContactMethod(CamelModel):
    """A single channel the organization can be reached through.

    Attributes:
        id: Registry assigned identifier
        type: Category tag such as phone, email or social
        label: Display label
        value: The contact detail itself
        description: Optional display text
        is_active: Whether the method is shown publicly
        order: Display position, lower first
    """

    id: int
    type: str
    label: str
    value: str
    description: str = ""
    is_active: bool = True
    order: int


class CreateContactMethodRequest(CamelModel):
    """Request model for creating a contact method."""

    type: Annotated[str, Field(..., min_length=1, max_length=50, description="Category tag (1-50 characters)")]
    label: Annotated[str, Field(..., min_length=1, max_length=100, description="Display label (1-100 characters)")]
    value: Annotated[str, Field(..., min_length=1, max_length=500, description="Contact detail (1-500 characters)")]
    description: Annotated[Optional[str], Field(None, max_length=200, description="Optional description (max 200 characters)")]
    is_active: Annotated[Optional[bool], Field(None, description="Whether the method is active, defaults to true")]
    order: Annotated[Optional[int], Field(None, ge=1, description="Positive display order, defaults to the new id")]


class UpdateContactMethodRequest(CamelModel):
    """Request model for a partial contact method update.

    Only fields sent with a non-null value are applied.
    """

    type: Annotated[Optional[str], Field(None, min_length=1, max_length=50)]
    label: Annotated[Optional[str], Field(None, min_length=1, max_length=100)]
    value: Annotated[Optional[str], Field(None, min_length=1, max_length=500)]
    description: Annotated[Optional[str], Field(None, max_length=200)]
    is_active: Optional[bool] = None
    order: Annotated[Optional[int], Field(None, ge=1)]


class ContactMethodOrder(CamelModel):
    id: int
    order: Annotated[int, Field(..., ge=1, description="Positive display order")]


class ReorderContactMethodsRequest(CamelModel):
    """Request model for bulk reordering contact methods."""

    orders: Annotated[List[ContactMethodOrder], Field(..., description="New order for each contact method id")]
