"""
Shop product models.
"""

from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    """First product of a shop, as needed to build a cart resource URL."""

    id: int = Field(description="Numeric product ID")
    variant_id: int = Field(description="Numeric ID of the product's first variant")
    title: Optional[str] = Field(default=None, description="Product title")

    def __str__(self) -> str:
        return f"{self.title or self.id} (variant {self.variant_id})"
