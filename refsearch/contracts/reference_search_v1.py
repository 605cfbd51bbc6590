"""Reference Search Contract v1.

Defines the canonical types for:
  - Category configuration (CategoryDescriptor, FieldMap, StaticSource, RemoteSource)
  - Standardized result payload (SearchResult)
  - Adapter failure taxonomy (AdapterTimeout, AdapterQueryError)

Descriptors are immutable values; a registry of them is injected into the
orchestrator at construction.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# Source kinds and matchable fields
# ---------------------------------------------------------------------------


class SourceKind(StrEnum):
    STATIC = "static"  # In-memory constant list, resolved synchronously
    REMOTE = "remote"  # Filtered, bounded query against a backing table


MatchField = Literal["code", "name", "extra"]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ReferenceSearchError(Exception):
    """Base for every error raised by the reference search engine."""


class RegistryError(ReferenceSearchError):
    """Category configuration is inconsistent (raised at startup, never per query)."""


class AdapterFailure(ReferenceSearchError):
    """A single category's search did not complete. Always degraded to zero results."""

    kind = "failure"

    def __init__(self, category: str, message: str):
        super().__init__(f"{category}: {message}")
        self.category = category
        self.message = message


class AdapterTimeout(AdapterFailure):
    kind = "timeout"


class AdapterQueryError(AdapterFailure):
    kind = "query_error"


# ---------------------------------------------------------------------------
# Category configuration
# ---------------------------------------------------------------------------


class FieldMap(BaseModel):
    """Maps logical result fields to record keys (static) or columns (remote)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="id")
    code: str | None = Field(default="code")
    name: str = Field(default="name")
    extra: str | None = Field(default=None, description="Secondary text, e.g. description")

    def column(self, field: str) -> str | None:
        return getattr(self, field, None)

    def columns(self) -> list[str]:
        """Distinct mapped columns in id, code, name, extra order."""
        out: list[str] = []
        for col in (self.id, self.code, self.name, self.extra):
            if col and col not in out:
                out.append(col)
        return out


class StaticSource(BaseModel):
    """In-memory collection searched synchronously."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    records: tuple[dict[str, Any], ...] = Field(default_factory=tuple)


class RemoteSource(BaseModel):
    """Backing table queried with an ilike OR predicate, active rows only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["remote"] = "remote"
    table: str = Field(description="Table name exposed by the data layer, e.g. 'currencies'")
    active_column: str | None = Field(
        default="is_active",
        description="Boolean column restricting results to active/visible rows. None = no filter.",
    )
    eq_filters: dict[str, str] = Field(
        default_factory=dict,
        description="Extra equality filters, e.g. {'category': 'leave_type'} or tenant scoping.",
    )
    order_column: str | None = Field(default=None, description="Ascending sort column")

    @field_validator("table")
    @classmethod
    def _validate_table(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("table must not be empty")
        return value


SourceConfig = Annotated[Union[StaticSource, RemoteSource], Field(discriminator="kind")]


class CategoryDescriptor(BaseModel):
    """One reference dataset: how to search it and where its results navigate to."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Stable category identifier, e.g. 'countries'")
    label: str = Field(description="User-facing label")
    is_editable: bool = Field(default=True)
    navigation_target: str = Field(
        description="Navigation destination id; several categories may share one"
    )
    match_fields: tuple[MatchField, ...] = Field(
        default=("code", "name"),
        description="Ordered fields eligible for case-insensitive substring match",
    )
    field_map: FieldMap = Field(default_factory=FieldMap)
    source: SourceConfig

    @field_validator("key", "navigation_target")
    @classmethod
    def _validate_identifier(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def _validate_match_fields(self) -> CategoryDescriptor:
        if not self.match_fields:
            raise ValueError(f"category '{self.key}' declares no match fields")
        if len(set(self.match_fields)) != len(self.match_fields):
            raise ValueError(f"category '{self.key}' repeats a match field")
        for field in self.match_fields:
            if not self.field_map.column(field):
                raise ValueError(
                    f"category '{self.key}' matches on '{field}' but maps no column for it"
                )
        return self

    @property
    def source_kind(self) -> SourceKind:
        return SourceKind(self.source.kind)

    def match_columns(self) -> list[str]:
        return [self.field_map.column(f) for f in self.match_fields]  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Standardized result payload
# ---------------------------------------------------------------------------


class SearchResult(BaseModel):
    """One matched record, unique per (category, id) within a search session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Record identifier within its category")
    category: str = Field(description="Key of the category that produced this result")
    code: str | None = Field(default=None)
    name: str = Field(default="")
    extra: str | None = Field(default=None)
    is_editable: bool = Field(default=False, description="Inherited from the category")

    @classmethod
    def from_record(
        cls, descriptor: CategoryDescriptor, record: dict[str, Any]
    ) -> SearchResult:
        fm = descriptor.field_map

        def _text(column: str | None) -> str | None:
            if not column:
                return None
            value = record.get(column)
            return None if value is None else str(value)

        return cls(
            id=_text(fm.id) or "",
            category=descriptor.key,
            code=_text(fm.code),
            name=_text(fm.name) or "",
            extra=_text(fm.extra),
            is_editable=descriptor.is_editable,
        )


def record_matches(descriptor: CategoryDescriptor, record: dict[str, Any], query: str) -> bool:
    """Case-insensitive literal substring containment over the declared match fields.

    Plain lowercasing, the same rule as ILIKE and the highlighter.
    """
    needle = query.lower()
    if not needle:
        return False
    for column in descriptor.match_columns():
        value = record.get(column)
        if value is not None and needle in str(value).lower():
            return True
    return False
