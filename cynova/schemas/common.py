"""Shared Schema Pieces — camelCase wire models and reusable field types.

Invariants:
    - Wire names are camelCase (yukaScore, ingredientIds); Python names snake_case
    - Unknown input fields are ignored
    - IdListIn decodes JSON text (or a list) into list[str]; IdListOut encodes back
    - Price is finite, rounded to 2 decimals, and still positive after rounding

Design Decisions:
    - Annotated types over per-model validators: one definition shared by every
      create/update schema
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer,
)
from pydantic.alias_generators import to_camel

from cynova.core.id_lists import decode_id_list, encode_id_list


def _round_price(value: float) -> float:
    rounded = round(value, 2)
    if rounded <= 0:
        raise ValueError("must be greater than 0")
    return rounded


IdListIn = Annotated[list[str], BeforeValidator(decode_id_list)]
IdListOut = Annotated[list[str], PlainSerializer(encode_id_list, return_type=str)]
Price = Annotated[float, Field(gt=0, allow_inf_nan=False), AfterValidator(_round_price)]


class WireModel(BaseModel):
    """Base for request schemas — camelCase aliases, extra fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    def to_store(self) -> dict[str, Any]:
        """Create payload: every field, defaults applied, Python names."""
        return self.model_dump(mode="json")


class PartialWireModel(WireModel):
    """Base for update schemas — only fields actually provided reach the store."""

    def to_store(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class RecordOut(BaseModel):
    """Base for response schemas — read from ORM objects, dumped by alias."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def render(cls, record: Any) -> dict[str, Any]:
        return cls.model_validate(record).model_dump(mode="json", by_alias=True)
