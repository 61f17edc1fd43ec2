class PricingError(Exception):
    """Base exception para erros de validação do cálculo de preço"""
    pass


class InvalidTypeError(PricingError, TypeError):
    """Algum parâmetro não é um número"""
    pass


class NegativeValueError(PricingError, ValueError):
    """Preço ou taxa negativos"""
    pass


class DiscountOutOfRangeError(PricingError, ValueError):
    """Desconto acima de 100%"""
    pass
