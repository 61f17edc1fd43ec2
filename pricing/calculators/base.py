from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Tuple

from pricing.errors import InvalidTypeError, NegativeValueError, DiscountOutOfRangeError
from pricing.interface import IPriceCalculator, Number

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)


def quantize_money(value: Decimal) -> Decimal:
    """
    Arredonda para duas casas, metade para longe do zero.

    A precisão cresce com a magnitude: quantize falha se o resultado
    tiver mais dígitos que a precisão do contexto (28 por padrão).
    """
    prec = max(28, value.adjusted() + 3)
    return value.quantize(CENTS, rounding=ROUND_HALF_UP, context=Context(prec=prec))


class BasePriceCalculator(IPriceCalculator):
    """
    Classe base com a validação e o arredondamento comuns.
    Subclasses implementam apenas a aritmética.
    """

    MAX_DISCOUNT = HUNDRED  # desconto máximo em %

    def validate_inputs(self, base_price: Number, discount_rate: Number, vat_rate: Number) -> Tuple[Decimal, Decimal, Decimal]:
        """
        Valida as entradas e as converte para Decimal.

        A primeira regra que falhar é a reportada: tipo, sinal, teto do desconto.
        """
        values = (base_price, discount_rate, vat_rate)

        if not all(self.is_number(v) for v in values):
            raise InvalidTypeError("all parameters must be numbers")

        base, discount, vat = (self.to_decimal(v) for v in values)

        if base < 0 or discount < 0 or vat < 0:
            raise NegativeValueError("prices and rates must be non-negative")
        if discount > self.MAX_DISCOUNT:
            raise DiscountOutOfRangeError("discount cannot exceed 100%")

        return base, discount, vat

    @staticmethod
    def is_number(value) -> bool:
        """Aceita int, float e Decimal finitos; bool e strings numéricas não contam"""
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            return False
        return Decimal(str(value)).is_finite()

    @staticmethod
    def to_decimal(value: Number) -> Decimal:
        # str() evita carregar o erro binário do float para o Decimal
        return value if isinstance(value, Decimal) else Decimal(str(value))

    @staticmethod
    def round_money(value: Decimal) -> float:
        """Arredonda para duas casas, metade para longe do zero"""
        return float(quantize_money(value))
