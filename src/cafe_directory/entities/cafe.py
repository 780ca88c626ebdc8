"""Café domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CafeEntity:
    """Domain entity for a single café listing.

    Attributes:
        name: Display name, the only field written to responses
        address: Street address
        price_category: Price ordinal (0 = cheapest)
    """

    name: str
    address: str = ""
    price_category: int = 0
