"""
Pydantic schemas for GraphQL introspection results and schema search output.

Introspection payloads are validated here, at the fetch boundary, so the search
code works with typed models instead of loosely-shaped JSON.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class SchemaDecodeError(Exception):
    """Raised when an introspection response cannot be decoded into a schema."""

    pass


class TypeRef(BaseModel):
    """A (possibly wrapped) reference to a named GraphQL type."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str | None = None
    kind: str | None = None
    of_type: TypeRef | None = Field(default=None, alias="ofType")


class IntrospectedField(BaseModel):
    """A field of an introspected GraphQL type."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    type: TypeRef

    @property
    def type_name(self) -> str | None:
        """
        Resolve the field's display type name.

        Uses the direct type name, falling back to the wrapped type's name for
        LIST / NON_NULL wrappers. Only one level is unwrapped, so `[Foo!]`
        resolves to None.
        """
        if self.type.name:
            return self.type.name
        if self.type.of_type is not None:
            return self.type.of_type.name
        return None


class IntrospectedType(BaseModel):
    """A type from `__schema.types`."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: str | None = None
    description: str | None = None
    fields: list[IntrospectedField] | None = None


class SchemaDocument(BaseModel):
    """The full list of introspected types, in the order the API returned them."""

    model_config = ConfigDict(frozen=True)

    types: list[IntrospectedType]

    @classmethod
    def from_introspection(cls, payload: Any) -> SchemaDocument:
        """
        Build a SchemaDocument from a raw `{"data": {"__schema": {...}}}` response.

        Raises:
            SchemaDecodeError: If the payload carries GraphQL errors instead of
                data, or does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise SchemaDecodeError("Introspection response is not a JSON object")

        data = payload.get("data")
        if data is None:
            errors = payload.get("errors") or []
            messages = [
                str(err.get("message")) for err in errors
                if isinstance(err, dict) and err.get("message")
            ]
            if messages:
                raise SchemaDecodeError(f"Introspection failed: {'; '.join(messages)}")
            raise SchemaDecodeError("Introspection response has no data")

        schema = data.get("__schema") if isinstance(data, dict) else None
        if not isinstance(schema, dict):
            raise SchemaDecodeError("Introspection response has no __schema")

        try:
            return cls.model_validate(schema)
        except ValidationError as e:
            raise SchemaDecodeError(
                f"Invalid introspection schema: {e.error_count()} validation error(s); "
                f"first: {_first_error(e)}",
            ) from e


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    location = ".".join(str(part) for part in err["loc"])
    return f"{location}: {err['msg']}"


class FieldSummary(BaseModel):
    """Projection of a field shown in search results."""

    name: str
    description: str | None = None
    type: str | None = None


class MatchedType(BaseModel):
    """A schema type that matched at least one search term."""

    name: str
    description: str | None = None
    fields: list[FieldSummary] | None = None


class Page(BaseModel):
    """One page of matched types with position metadata."""

    items: list[MatchedType]
    page: int  # 1-based page number that was requested
    total_pages: int  # ceil(total / page size)
    total: int  # Total number of matched types (before pagination)

    @property
    def has_next(self) -> bool:
        """True if a later page holds more results."""
        return self.page < self.total_pages
