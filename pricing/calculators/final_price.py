import logging

from pricing.calculators.base import BasePriceCalculator, HUNDRED
from pricing.interface import PriceQuote, PriceBreakdown, Number

logger = logging.getLogger(__name__)


class PriceCalculator(BasePriceCalculator):
    """
    Calculadora de preço final.

    Aplica primeiro o desconto e depois o imposto (IVA) sobre o preço já
    descontado. O arredondamento é feito só na saída, nunca nos passos
    intermediários.
    """

    def compute(self, base_price: Number, discount_rate: Number, vat_rate: Number) -> PriceQuote:
        base, discount, vat = self.validate_inputs(base_price, discount_rate, vat_rate)

        discounted = base * (1 - discount / HUNDRED)
        final = discounted * (1 + vat / HUNDRED)

        quote = PriceQuote(
            discounted_price=self.round_money(discounted),
            final_price=self.round_money(final),
        )
        logger.debug(f"compute({base_price}, {discount_rate}, {vat_rate}) -> {quote}")
        return quote

    def get_breakdown(self, base_price: Number, discount_rate: Number, vat_rate: Number) -> PriceBreakdown:
        base, discount, vat = self.validate_inputs(base_price, discount_rate, vat_rate)

        discount_factor = 1 - discount / HUNDRED
        vat_factor = 1 + vat / HUNDRED
        discounted = base * discount_factor
        final = discounted * vat_factor

        steps = [
            {"label": "Preço base", "value": self.round_money(base)},
            {"label": f"Desconto ({discount:g}%)", "value": float(discount_factor)},
            {"label": "Preço com desconto", "value": self.round_money(discounted)},
            {"label": f"IVA ({vat:g}%)", "value": float(vat_factor)},
            {"label": "Preço final", "value": self.round_money(final)},
        ]

        notes = [
            "Desconto aplicado antes do IVA",
            "Arredondamento a 2 casas (metade para longe do zero) apenas nos valores finais",
        ]

        return PriceBreakdown(steps=steps, notes=notes)


_default_calculator = PriceCalculator()


def calculate_final_price(base_price: Number, discount_rate: Number, vat_rate: Number) -> PriceQuote:
    """Atalho para PriceCalculator().compute(...)"""
    return _default_calculator.compute(base_price, discount_rate, vat_rate)
