# tiliches/models/product.py

"""Product data model decoded from the catalog API."""

import math
from dataclasses import dataclass, field
from typing import Any


def _text(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _number(value: Any, key: str) -> float:
    """Finite float from a JSON number (or numeric string)."""
    if value is None or isinstance(value, bool):
        raise TypeError(f"{key} must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{key} must be finite, got {value!r}")
    return result


def _integer(value: Any, key: str) -> int:
    """Exact int; integral floats like ``3.0`` pass, ``1.9`` does not."""
    if value is None or isinstance(value, bool):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{key} must be integral, got {value!r}")
        return int(value)
    return int(value)


@dataclass(frozen=True)
class Rating:
    """Aggregate customer rating attached to a product."""

    rate: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class Product:
    """A single catalog item as served by the Fake Store API."""

    id: int
    title: str
    price: float
    category: str
    image: str
    description: str = ""
    rating: Rating = field(default_factory=Rating)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from one decoded JSON object.

        Raises ``KeyError`` for missing required keys, ``TypeError`` for
        nulls and wrongly typed values, and ``ValueError`` for numbers that
        are non-integral ids/counts, non-finite, or unparseable.
        """
        if not isinstance(data, dict):
            raise TypeError(
                f"expected a JSON object, got {type(data).__name__}"
            )
        raw_rating: Any = data.get("rating") or {}
        if not isinstance(raw_rating, dict):
            raise TypeError("rating must be a JSON object")
        description = data.get("description")
        return cls(
            id=_integer(data["id"], "id"),
            title=_text(data, "title"),
            price=_number(data["price"], "price"),
            category=_text(data, "category"),
            image=_text(data, "image"),
            description="" if description is None else str(description),
            rating=Rating(
                rate=_number(raw_rating.get("rate", 0.0), "rating.rate"),
                count=_integer(raw_rating.get("count", 0), "rating.count"),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the API's JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "rating": {
                "rate": self.rating.rate,
                "count": self.rating.count,
            },
        }
