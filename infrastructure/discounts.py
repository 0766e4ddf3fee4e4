"""In-memory promo code table"""
from typing import Dict, Optional

from domain.interfaces import DiscountLookup


class InMemoryDiscountLookup(DiscountLookup):
    """Fixed mapping of promo codes to discount percentages"""

    def __init__(self, codes: Dict[str, float]):
        for code, percentage in codes.items():
            if not 0 <= percentage <= 100:
                raise ValueError(f"Discount for {code} must be between 0 and 100, got {percentage}")
        self._codes = dict(codes)

    def lookup(self, code: str) -> Optional[float]:
        return self._codes.get(code)
