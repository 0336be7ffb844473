"""Pydantic data models for sales records."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Sale(BaseModel):
    """Sales record keyed by product_id."""

    product_id: int = Field(0, description="Product identifier (identity key)")
    product_name: Optional[str] = Field(None, description="Product name")
    price: int = Field(0, description="Price in whole currency units")

    @field_validator("product_id", "price", mode="before")
    @classmethod
    def null_as_zero(cls, v: object) -> object:
        """Treat JSON null as 0 for the integer fields."""
        return 0 if v is None else v


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a service write; truthy when the write succeeded."""

    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "WriteResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "WriteResult":
        return cls(ok=False, reason=reason)
