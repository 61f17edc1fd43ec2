from decimal import Decimal

import pytest
from pydantic import ValidationError
from pricing import (
    PriceCalculator,
    IPriceCalculator,
    PriceQuote,
    calculate_final_price,
    PricingError,
    InvalidTypeError,
    NegativeValueError,
    DiscountOutOfRangeError,
)


def test_discount_then_vat():
    """Testa caso base: 10% de desconto e 21% de IVA"""
    # 100.00 * (1 - 0.10) = 90.00 (desconto)
    # 90.00 * (1 + 0.21) = 108.90 (IVA)
    result = calculate_final_price(100, 10, 21)

    assert result.discounted_price == 90.00
    assert result.final_price == 108.90


def test_only_vat_when_discount_is_zero():
    """Testa que só o IVA é aplicado com desconto 0%"""
    result = calculate_final_price(50, 0, 4)

    assert result.discounted_price == 50.00
    assert result.final_price == 52.00


def test_full_discount_results_in_zero():
    """Testa que desconto de 100% zera os dois valores"""
    result = calculate_final_price(1000, 100, 21)

    assert result.discounted_price == 0.0
    assert result.final_price == 0.0


def test_zero_vat_keeps_discounted_price():
    """Testa que IVA 0% mantém o preço com desconto"""
    result = calculate_final_price(80, 25, 0)

    assert result.discounted_price == 60.00
    assert result.final_price == result.discounted_price


def test_vat_has_no_upper_bound():
    """Testa que IVA acima de 100% é aceito"""
    result = calculate_final_price(100, 0, 250)

    assert result.final_price == 350.00


def test_rounding_is_half_away_from_zero():
    """Testa arredondamento comercial (0.125 -> 0.13, não 0.12)"""
    assert calculate_final_price(0.125, 0, 0).discounted_price == 0.13
    assert calculate_final_price(10.005, 0, 0).discounted_price == 10.01


def test_rounding_only_on_output():
    """Testa que o preço final usa o valor descontado sem arredondar"""
    # 0.015 -> 0.02 (exibido), mas 0.015 * 1.5 = 0.0225 -> 0.02
    result = calculate_final_price(0.015, 0, 50)

    assert result.discounted_price == 0.02
    assert result.final_price == 0.02


def test_accepts_floats_and_decimals():
    """Testa entradas float e Decimal"""
    assert calculate_final_price(19.99, 15.5, 21).discounted_price == 16.89
    assert calculate_final_price(Decimal("19.99"), Decimal("15.5"), Decimal("21")).final_price == 20.44


def test_quote_is_immutable():
    """Testa que PriceQuote não pode ser alterado após criado"""
    result = calculate_final_price(100, 10, 21)

    assert isinstance(result, PriceQuote)
    with pytest.raises(ValidationError):
        result.final_price = 1.0


def test_discount_above_100_raises():
    """Testa erro para desconto maior que 100%"""
    with pytest.raises(DiscountOutOfRangeError) as exc_info:
        calculate_final_price(100, 101, 21)

    assert "discount cannot exceed 100%" in str(exc_info.value)


@pytest.mark.parametrize("args", [
    ("100", 10, 21),
    (100, None, 21),
    (100, 10, True),
    (100, [10], 21),
    (float("nan"), 10, 21),
    (100, 10, float("inf")),
])
def test_non_numeric_input_raises(args):
    """Testa erro de tipo para valores não numéricos"""
    with pytest.raises(InvalidTypeError):
        calculate_final_price(*args)


@pytest.mark.parametrize("args", [(-1, 10, 21), (100, -0.5, 21), (100, 10, -21)])
def test_negative_input_raises(args):
    """Testa erro para valores negativos"""
    with pytest.raises(NegativeValueError):
        calculate_final_price(*args)


def test_validation_order_first_failure_wins():
    """Testa a ordem: tipo, depois sinal, depois teto do desconto"""
    with pytest.raises(InvalidTypeError):
        calculate_final_price("x", -1, 21)
    with pytest.raises(NegativeValueError):
        calculate_final_price(-1, 150, 21)


def test_errors_share_base_and_builtin_types():
    """Testa hierarquia de exceções"""
    assert issubclass(InvalidTypeError, PricingError)
    assert issubclass(InvalidTypeError, TypeError)
    assert issubclass(NegativeValueError, ValueError)
    assert issubclass(DiscountOutOfRangeError, ValueError)


def test_calculator_implements_interface():
    """Testa que PriceCalculator é um IPriceCalculator"""
    calc = PriceCalculator()

    assert isinstance(calc, IPriceCalculator)
    assert calc.compute(100, 10, 21) == calculate_final_price(100, 10, 21)


def test_breakdown_contains_all_steps():
    """Testa se breakdown contém todos os passos esperados"""
    breakdown = PriceCalculator().get_breakdown(100, 10, 21)

    assert len(breakdown.steps) == 5
    assert breakdown.steps[0]["value"] == 100.0
    assert breakdown.steps[2]["value"] == 90.0
    assert breakdown.steps[-1]["value"] == 108.9
    assert breakdown.notes is not None


def test_breakdown_validates_like_compute():
    """Testa que breakdown aplica a mesma validação"""
    with pytest.raises(DiscountOutOfRangeError):
        PriceCalculator().get_breakdown(100, 101, 21)


@pytest.mark.parametrize("base_price", [1e26, 10**26, Decimal("1E+26"), 1e300])
def test_large_values_do_not_overflow_rounding(base_price):
    """Testa preços muito grandes (acima de 28 dígitos no arredondamento)"""
    result = calculate_final_price(base_price, 0, 0)

    assert result.discounted_price == float(base_price)
    assert result.final_price == float(base_price)


def test_large_value_with_discount_and_vat():
    """Testa desconto e IVA sobre preço muito grande"""
    result = calculate_final_price(10**26, 50, 21)

    assert result.discounted_price == 5e25
    assert result.final_price == 6.05e25


def test_breakdown_with_large_value():
    """Testa breakdown com preço muito grande"""
    breakdown = PriceCalculator().get_breakdown(1e300, 0, 0)

    assert breakdown.steps[-1]["value"] == 1e300
