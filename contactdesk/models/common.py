"""Shared response models for the contact desk API.

Every endpoint answers with the same envelope: ``success`` plus whichever of
``message``, ``data``, ``errors``, ``pagination`` and ``stats`` apply.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model that reads snake_case or camelCase and writes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ErrorDetail(BaseModel):
    """A single failed validation rule.

    Attributes:
        field: Dotted path of the offending input
        message: Human readable reason
        location: Where the input came from (body, query or path)
    """

    field: str
    message: str
    location: Optional[str] = None


class ApiResponse(CamelModel, Generic[T]):
    """Uniform response envelope."""

    success: Annotated[bool, Field(..., description="Whether the request succeeded")]
    message: Annotated[Optional[str], Field(None, description="Human readable outcome")]
    data: Annotated[Optional[T], Field(None, description="Response payload")]
    errors: Annotated[
        Optional[List[ErrorDetail]],
        Field(None, description="Every validation rule the request violated"),
    ]
