"""Data models for business-for-sale listings."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bizhub.normalize import format_price, format_uploaded_at

UNTITLED = "Untitled Business"


class Listing(BaseModel):
    """A single listing as read from the data store.

    Fields keep their raw representation; ``price`` and ``uploaded_at`` are
    interpreted by :mod:`bizhub.normalize` whenever they are read.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    url: str = "#"
    price: Union[int, float, str, None] = None
    state: Optional[str] = None
    uploaded_at: Any = Field(default=None, alias="uploadedAt")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("name", mode="before")
    @classmethod
    def _name_default(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("url", mode="before")
    @classmethod
    def _url_default(cls, v: Any) -> Any:
        return "#" if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def _price_passthrough(cls, v: Any) -> Any:
        # Booleans and other stray values count as no price at all
        if isinstance(v, bool) or not isinstance(v, (int, float, str, type(None))):
            return None
        return v


class ListingCard(BaseModel):
    """Display-ready projection of a listing."""

    id: str
    name: str
    url: str
    price_display: str
    state: Optional[str] = None
    uploaded_display: str = ""

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingCard":
        return cls(
            id=listing.id,
            name=listing.name or UNTITLED,
            url=listing.url,
            price_display=format_price(listing.price),
            state=listing.state,
            uploaded_display=format_uploaded_at(listing.uploaded_at),
        )
