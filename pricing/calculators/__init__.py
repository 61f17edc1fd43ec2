from .base import BasePriceCalculator
from .final_price import PriceCalculator, calculate_final_price

__all__ = [
    "BasePriceCalculator",
    "PriceCalculator",
    "calculate_final_price",
]
