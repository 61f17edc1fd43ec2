from .interface import IPriceCalculator, PriceQuote, PriceBreakdown
from .errors import PricingError, InvalidTypeError, NegativeValueError, DiscountOutOfRangeError
from .calculators import PriceCalculator, calculate_final_price

__all__ = [
    "IPriceCalculator",
    "PriceQuote",
    "PriceBreakdown",
    "PricingError",
    "InvalidTypeError",
    "NegativeValueError",
    "DiscountOutOfRangeError",
    "PriceCalculator",
    "calculate_final_price",
]
