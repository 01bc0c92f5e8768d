"""Product: a read-only view of an external catalog record.

Products are never owned or persisted here.  They are rebuilt from the
external catalog on every cache miss, so the type is frozen: nothing in
the domain is allowed to mutate catalog data.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Money

GENDERS = ("men", "women", "unisex")


@dataclass(frozen=True)
class Product:
    """A product as served by the catalog gateway."""

    id: str
    name: str
    brand: str
    price: Money
    category: str
    gender: str
    sizes: tuple[str, ...]
    colors: tuple[str, ...]
    stock: int
    rating: float | None = None
    discount_percentage: float | None = None
    description: str | None = None
    image: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
    thumbnail: str | None = None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
