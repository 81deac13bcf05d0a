"""
Base request types for the Horizon API.

Provides the foundation every endpoint request is built on:

- ``Request``: immutable request value that renders its query string and URL
- ``Pagination`` / ``PaginatedRequest``: the shared cursor/limit/order contract
- ``IncludeFailedRequest``: pagination plus the ``include_failed`` flag
- ``IdentifierSlot`` / ``Unset``: typestate markers for required identifiers
- ``PostRequest``: requests submitted as a form body
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, NoReturn, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ..runtime.errors import UnsetIdentifierError
from ..runtime.query import Fragment, build_query_parameters, format_flag, fragment
from ..runtime.validation import validate_cursor, validate_limit
from .assets import Order

RequestT = TypeVar("RequestT", bound="Request")
PaginatedT = TypeVar("PaginatedT", bound="PaginatedRequest")
IncludeFailedT = TypeVar("IncludeFailedT", bound="IncludeFailedRequest")


class Request(BaseModel, ABC):
    """
    Base class for all GET requests.

    Subclasses describe their resource path and their query fragments; the
    query string and the URL are assembled here so that every endpoint
    serializes the same way.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def _resource_path(self) -> str:
        """Path below the base URL, without leading slash."""

    def _query_fragments(self) -> List[Fragment]:
        """Query fragments in the order Horizon documents them."""
        return []

    def get_query_parameters(self) -> str:
        """
        Render the query string.

        Returns:
            ``""`` when no parameter is set, otherwise ``?key=value&...``

        Raises:
            UnsetIdentifierError: If a required identifier has not been set
        """
        self._check_required()
        return build_query_parameters(self._query_fragments())

    def _check_required(self) -> None:
        """Fail on the first identifier slot, in field order, that is still unset."""
        for name in type(self).model_fields:
            slot = getattr(self, name)
            if isinstance(slot, Unset):
                raise UnsetIdentifierError(slot.slot_name)

    def build_url(self, base_url: str) -> str:
        """
        Build the full request URL.

        Args:
            base_url: Horizon server URL, e.g. ``https://horizon-testnet.stellar.org``

        Returns:
            ``{base_url}/{resource_path}{query}``
        """
        return f"{base_url}/{self._resource_path()}{self.get_query_parameters()}"

    def _replace(self: RequestT, **changes: Any) -> RequestT:
        """Return a copy with ``changes`` applied; the receiver is left untouched."""
        return self.model_copy(update=changes)

    def _advance(self, **changes: Any) -> Any:
        """Like ``_replace``, for setters that move an identifier slot to its set state."""
        return self.model_copy(update=changes)


class Pagination(BaseModel):
    """
    Cursor, limit and order of a list request.

    Every field is optional and validated when it is set.
    """

    model_config = ConfigDict(frozen=True)

    cursor: Optional[int] = None
    limit: Optional[int] = None
    order: Optional[Order] = None

    def with_cursor(self, cursor: int) -> Pagination:
        return self.model_copy(update={"cursor": validate_cursor(cursor)})

    def with_limit(self, limit: int) -> Pagination:
        return self.model_copy(update={"limit": validate_limit(limit)})

    def with_order(self, order: Order) -> Pagination:
        return self.model_copy(update={"order": Order(order)})

    def fragments(self) -> List[Fragment]:
        return [
            fragment("cursor", self.cursor),
            fragment("limit", self.limit),
            fragment("order", self.order),
        ]


class PaginatedRequest(Request, ABC):
    """A list request carrying the shared pagination contract."""

    pagination: Pagination = Pagination()

    @property
    def cursor(self) -> Optional[int]:
        return self.pagination.cursor

    @property
    def limit(self) -> Optional[int]:
        return self.pagination.limit

    @property
    def order(self) -> Optional[Order]:
        return self.pagination.order

    def set_cursor(self: PaginatedT, cursor: int) -> PaginatedT:
        """
        Set the paging cursor.

        Args:
            cursor: Paging token of the last record seen, at least 1

        Returns:
            New request with the cursor replaced

        Raises:
            ValidationError: If cursor is less than 1
        """
        return self._replace(pagination=self.pagination.with_cursor(cursor))

    def set_limit(self: PaginatedT, limit: int) -> PaginatedT:
        """
        Set the maximum number of records returned.

        Raises:
            ValidationError: If limit is outside 1..200
        """
        return self._replace(pagination=self.pagination.with_limit(limit))

    def set_order(self: PaginatedT, order: Order) -> PaginatedT:
        """Set the record order."""
        return self._replace(pagination=self.pagination.with_order(order))

    def _query_fragments(self) -> List[Fragment]:
        return self.pagination.fragments()


class IncludeFailedRequest(PaginatedRequest, ABC):
    """A list request that can include records of failed transactions."""

    include_failed: Optional[bool] = None

    def set_include_failed(self: IncludeFailedT, include_failed: bool) -> IncludeFailedT:
        """Sent as ``include_failed=true`` or ``include_failed=false``."""
        return self._replace(include_failed=include_failed)

    def _query_fragments(self) -> List[Fragment]:
        flag = format_flag(self.include_failed) if self.include_failed is not None else None
        return [*self.pagination.fragments(), fragment("include_failed", flag)]


class IdentifierSlot(BaseModel):
    """A required request identifier, either unset or holding a value."""

    model_config = ConfigDict(frozen=True)


class Unset(IdentifierSlot):
    """
    Marker for a required identifier that has not been supplied yet.

    Reading the slot's value fails with UnsetIdentifierError, and
    ``Request.get_query_parameters`` checks every slot up front, so a request
    with an unset slot raises from ``build_url`` and
    ``get_query_parameters`` before any URL is produced. The set-state
    annotations on those methods document the intended use; type checkers
    do not reject calls on an unset request.
    """

    slot_name: ClassVar[str] = "identifier"

    @property
    def value(self) -> NoReturn:
        raise UnsetIdentifierError(self.slot_name)


class PostRequest(BaseModel, ABC):
    """Base class for requests submitted as a form-encoded POST body."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def _resource_path(self) -> str:
        """Path below the base URL, without leading slash."""

    @abstractmethod
    def get_body(self) -> Dict[str, str]:
        """Form fields of the request body."""

    def build_url(self, base_url: str) -> str:
        return f"{base_url}/{self._resource_path()}"


__all__ = [
    "Request",
    "Pagination",
    "PaginatedRequest",
    "IncludeFailedRequest",
    "IdentifierSlot",
    "Unset",
    "PostRequest",
]
