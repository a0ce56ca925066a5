"""Services for the contact method registry.

The registry is an ordered, process-local collection. Every read and write
goes through one lock, and ids come from a counter that only moves forward,
so a deleted id is never handed out again.
"""

import copy
import logging
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from fastapi import HTTPException, status

from contactdesk.models.contact import (
    ContactMethod,
    ContactMethodOrder,
    CreateContactMethodRequest,
    UpdateContactMethodRequest,
)
from contactdesk.utils.constants import DEFAULT_CONTACT_METHODS

logger = logging.getLogger(__name__)


class ContactMethodRegistry:
    """In-memory store of contact methods."""

    def __init__(self, seed: Optional[Iterable[Dict]] = None):
        """Initialize the registry.

        Args:
            seed: Initial records. The registry starts empty when omitted.
        """
        self._lock = threading.RLock()
        self._methods: List[ContactMethod] = [
            ContactMethod(**record) for record in (seed or [])
        ]
        self._next_id = max((method.id for method in self._methods), default=0) + 1

    def _find(self, contact_method_id: int) -> ContactMethod:
        for method in self._methods:
            if method.id == contact_method_id:
                return method
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contact method not found",
        )

    @staticmethod
    def _sorted(methods: Iterable[ContactMethod]) -> List[ContactMethod]:
        # sorted() is stable, so equal orders keep insertion order
        return sorted(methods, key=lambda method: method.order)

    def list_methods(self, is_active: Optional[bool] = None) -> List[ContactMethod]:
        """Return contact methods sorted by display order.

        Args:
            is_active: When given, only methods with this active flag are returned.

        Returns:
            Copies of the matching records, lowest order first.
        """
        with self._lock:
            methods = [
                method
                for method in self._methods
                if is_active is None or method.is_active == is_active
            ]
            return [method.model_copy() for method in self._sorted(methods)]

    def get_method(self, contact_method_id: int) -> ContactMethod:
        with self._lock:
            return self._find(contact_method_id).model_copy()

    def create_method(self, request: CreateContactMethodRequest) -> ContactMethod:
        """Create a contact method with a fresh id.

        Args:
            request: Validated creation payload

        Returns:
            The stored record
        """
        with self._lock:
            new_id = self._next_id
            self._next_id += 1

            method = ContactMethod(
                id=new_id,
                type=request.type,
                label=request.label,
                value=request.value,
                description=request.description or "",
                is_active=request.is_active if request.is_active is not None else True,
                order=request.order or new_id,
            )
            self._methods.append(method)
            logger.info(f"Created contact method {new_id} ({method.type})")
            return method.model_copy()

    def update_method(
        self, contact_method_id: int, request: UpdateContactMethodRequest
    ) -> ContactMethod:
        """Apply a partial update to a contact method.

        Every field sent with a non-null value overwrites the stored one;
        everything else is left as is.

        Args:
            contact_method_id: Id of the record to update
            request: Validated partial payload

        Returns:
            The updated record

        Raises:
            HTTPException: 404 if no record has the given id
        """
        changes = {
            field: value
            for field, value in request.model_dump(exclude_unset=True).items()
            if value is not None
        }
        with self._lock:
            method = self._find(contact_method_id)
            for field, value in changes.items():
                setattr(method, field, value)
            if changes:
                logger.info(
                    f"Updated contact method {contact_method_id}: {sorted(changes)}"
                )
            return method.model_copy()

    def delete_method(self, contact_method_id: int) -> None:
        with self._lock:
            method = self._find(contact_method_id)
            self._methods.remove(method)
            logger.info(f"Deleted contact method {contact_method_id}")

    def toggle_method(self, contact_method_id: int) -> Tuple[ContactMethod, str]:
        """Flip the active flag of a contact method.

        Returns:
            The updated record and the new state, "activated" or "deactivated"
        """
        with self._lock:
            method = self._find(contact_method_id)
            method.is_active = not method.is_active
            state = "activated" if method.is_active else "deactivated"
            logger.info(f"Contact method {contact_method_id} {state}")
            return method.model_copy(), state

    def reorder_methods(self, orders: List[ContactMethodOrder]) -> List[ContactMethod]:
        """Set new display orders and re-sort the whole registry.

        Ids that do not exist are skipped without error.

        Args:
            orders: New order value per contact method id

        Returns:
            Every record in the registry, sorted by order
        """
        with self._lock:
            by_id = {method.id: method for method in self._methods}
            skipped = []
            for item in orders:
                method = by_id.get(item.id)
                if method is None:
                    skipped.append(item.id)
                    continue
                method.order = item.order

            self._methods = self._sorted(self._methods)
            if skipped:
                logger.info(f"Reorder skipped unknown contact method ids: {skipped}")
            return [method.model_copy() for method in self._methods]


contact_method_registry = ContactMethodRegistry(copy.deepcopy(DEFAULT_CONTACT_METHODS))
