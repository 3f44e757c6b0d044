"""Pydantic models for quote catalog records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator
from pydantic.alias_generators import to_camel


class CatalogRecord(BaseModel):
    """Immutable priced record; serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(min_length=1)
    name: str
    price: NonNegativeInt

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CatalogItem(CatalogRecord):
    """Feature, add-on, page component or contact feature."""

    timeline: str | None = None
    description: str | None = None
    icon: str | None = None


class QuotePackage(CatalogRecord):
    """Base website package."""

    original_price: NonNegativeInt | None = None
    timeline: str | None = None
    description: str | None = None
    included_features: tuple[str, ...] = ()


class EmergencyTier(CatalogRecord):
    """Emergency service level."""

    response_time: str
    features: tuple[str, ...] = ()
    popular: bool = False


class ServiceZone(CatalogRecord):
    """Service-area coverage zone."""

    radius: str
    response_time: str
    features: tuple[str, ...] = ()


class BrandFeature(CatalogRecord):
    """HVAC or appliance feature with the brands it covers."""

    description: str | None = None
    brands: tuple[str, ...] = ()

    @field_validator("brands")
    @classmethod
    def _brands_unique(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("brands must not repeat")
        return value


class ComponentCatalog(BaseModel):
    """Page, feature and technical components of a custom quote."""

    model_config = ConfigDict(frozen=True)

    pages: tuple[CatalogItem, ...]
    features: tuple[CatalogItem, ...]
    technical: tuple[CatalogItem, ...]

    def to_json(self) -> dict[str, Any]:
        return {
            "pages": [item.to_json() for item in self.pages],
            "features": [item.to_json() for item in self.features],
            "technical": [item.to_json() for item in self.technical],
        }


def check_unique_ids(name: str, records: Sequence[CatalogRecord]) -> None:
    """Raise ValueError if two records in one catalog share an id."""
    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"duplicate id {record.id!r} in catalog {name!r}")
        seen.add(record.id)
