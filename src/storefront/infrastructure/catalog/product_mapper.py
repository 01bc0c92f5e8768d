"""Maps raw catalog records onto the Product shape.

The derived fields (gender, sizes, colors) do not exist upstream; they are
computed from the category on every mapping.
"""

from __future__ import annotations

import random
from typing import Any

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

MEN_CATEGORIES = frozenset({"mens-shoes", "mens-watches", "mens-shirts", "mens-bags"})
WOMEN_CATEGORIES = frozenset(
    {"womens-shoes", "womens-watches", "womens-dresses", "womens-bags"}
)

NUMERIC_SIZES = ("6", "7", "8", "9", "10", "11", "12")
APPAREL_SIZES = ("XS", "S", "M", "L", "XL", "XXL")
ONE_SIZE = ("One Size",)

COLOR_PALETTE = ("black", "white", "red", "blue", "green", "yellow", "pink", "purple")
MIN_COLORS = 2
MAX_COLORS = 5


class ColorSelector:
    """Picks the leading 2-5 colors of the palette.

    Pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def select(self, category: str) -> tuple[str, ...]:
        count = self._rng.randint(MIN_COLORS, MAX_COLORS)
        return COLOR_PALETTE[:count]


def determine_gender(category: str) -> str:
    if category in MEN_CATEGORIES:
        return "men"
    if category in WOMEN_CATEGORIES:
        return "women"
    return "unisex"


def generate_sizes(category: str) -> tuple[str, ...]:
    if "shoes" in category or "watches" in category:
        return NUMERIC_SIZES
    if "shirts" in category or "dresses" in category:
        return APPAREL_SIZES
    return ONE_SIZE


class ProductMapper:

    def __init__(self, color_selector: ColorSelector | None = None) -> None:
        self._colors = color_selector or ColorSelector()

    def to_domain(self, raw: dict[str, Any]) -> Product:
        """Build a Product from one raw record.

        Raises KeyError, TypeError or ValidationError on malformed input;
        the gateway turns those into UpstreamUnavailableError.
        """
        category = str(raw["category"])
        images = tuple(str(url) for url in raw.get("images") or ())
        return Product(
            id=str(raw["id"]),
            name=str(raw["title"]),
            brand=raw.get("brand") or "Unknown",
            price=Money.of(raw["price"]),
            category=category,
            gender=determine_gender(category),
            sizes=generate_sizes(category),
            colors=self._colors.select(category),
            stock=int(raw.get("stock") or 0),
            rating=raw.get("rating"),
            discount_percentage=raw.get("discountPercentage"),
            description=raw.get("description"),
            image=images[0] if images else None,
            images=images,
            thumbnail=raw.get("thumbnail"),
        )
