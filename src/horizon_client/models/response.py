"""
Response envelopes.

Horizon returns single resources as JSON objects carrying a ``_links`` map,
and lists as pages::

    {"_links": {"self": ..., "next": ..., "prev": ...},
     "_embedded": {"records": [...]}}

Unknown fields are kept (``extra="allow"``) so newer Horizon versions do
not break parsing.
"""

from __future__ import annotations
from typing import Dict, Generic, List, Optional, Type, TypeVar
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..runtime.errors import ResponseParseError

ModelT = TypeVar("ModelT", bound="HorizonModel")
RecordT = TypeVar("RecordT", bound="Record")


class HorizonModel(BaseModel):
    """Base class for everything parsed from a Horizon response body."""

    model_config = {"extra": "allow", "populate_by_name": True}

    @classmethod
    def from_json(cls: Type[ModelT], body: str) -> ModelT:
        """
        Parse a response body.

        Args:
            body: Raw JSON text

        Returns:
            Parsed model

        Raises:
            ResponseParseError: If the body is not valid JSON or does not match the model
        """
        try:
            return cls.model_validate_json(body)
        except PydanticValidationError as e:
            raise ResponseParseError(f"Failed to parse {cls.__name__} response", {"errors": e.error_count()}, e)


class Link(BaseModel):
    href: Optional[str] = None
    templated: Optional[bool] = None


class Record(HorizonModel):
    """A single resource with its hypermedia links."""

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")


class PageLinks(BaseModel):
    self_link: Optional[Link] = Field(default=None, alias="self")
    next: Optional[Link] = None
    prev: Optional[Link] = None

    model_config = {"populate_by_name": True}


class Embedded(BaseModel, Generic[RecordT]):
    records: List[RecordT] = Field(default_factory=list)


class Page(HorizonModel, Generic[RecordT]):
    """
    One page of a list response.

    Use a parametrized page to parse, e.g. ``Page[Ledger].from_json(body)``.
    """

    links: PageLinks = Field(default_factory=PageLinks, alias="_links")
    embedded: Embedded[RecordT] = Field(default_factory=Embedded, alias="_embedded")

    @property
    def records(self) -> List[RecordT]:
        return self.embedded.records

    def next_cursor(self) -> Optional[str]:
        """Cursor of the next page, taken from the ``next`` link."""
        if self.links.next is None or not self.links.next.href:
            return None
        values = parse_qs(urlparse(self.links.next.href).query).get("cursor")
        return values[0] if values else None


__all__ = ["HorizonModel", "Link", "Record", "PageLinks", "Embedded", "Page"]
