# -*- coding: utf-8 -*-
"""
Adaptador de interface da calculadora de preço final
Lê os campos do formulário, chama o core (pricing) e formata o resultado em Euro
"""

import logging
import re
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from config import settings
from pricing import PricingError, calculate_final_price
from pricing.calculators.base import quantize_money

# Configuração de logging estruturado
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


CURRENCY_SYMBOL = "€"
# Texto fixo da página para campos vazios (não passa pelo formatador)
PLACEHOLDER = "0.00 €"
# es-ES só agrupa milhares a partir de 5 dígitos inteiros (1000,00 mas 10.000,00)
MIN_GROUPING_DIGITS = 5

# Mesmo prefixo aceito por parseFloat do navegador
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ResultDisplay(BaseModel):
    """Textos a exibir nos campos de resultado"""
    discounted_price: str
    final_amount: str
    error: Optional[str] = None


def parse_field(raw: Optional[str]) -> Optional[float]:
    """
    Converte o texto de um campo em número, como parseFloat.

    Usa o maior prefixo numérico após espaços iniciais ("12abc" -> 12.0).

    Returns:
        float, ou None se não houver prefixo numérico (campo vazio ou inválido)
    """
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(raw.lstrip())
    if not match:
        return None
    text = match.group(0)
    if text.endswith("Infinity"):
        return float(text.replace("Infinity", "inf"))
    return float(text)


def format_currency(value: float) -> str:
    """Formata valor como moeda (es-ES, EUR): 1234.5 -> '1234,50 €', 12345.5 -> '12.345,50 €'"""
    amount = quantize_money(Decimal(str(value)))
    sign = "-" if amount < 0 else ""
    integer, _, cents = f"{amount.copy_abs():.2f}".partition(".")
    if len(integer) >= MIN_GROUPING_DIGITS:
        integer = f"{int(integer):,}".replace(",", ".")
    return f"{sign}{integer},{cents}\u00a0{CURRENCY_SYMBOL}"


def render_results(base_raw: Optional[str], discount_raw: Optional[str], vat_raw: Optional[str]) -> ResultDisplay:
    """
    Calcula os textos de resultado a partir dos valores crus do formulário.

    - Campo vazio ou não numérico: placeholders "0.00 €", sem chamar o core
    - Erro de validação: "Error" / "Error: <mensagem>"
    """
    base_price = parse_field(base_raw)
    discount_rate = parse_field(discount_raw)
    vat_rate = parse_field(vat_raw)

    if base_price is None or discount_rate is None or vat_rate is None:
        return ResultDisplay(discounted_price=PLACEHOLDER, final_amount=PLACEHOLDER)

    try:
        quote = calculate_final_price(base_price, discount_rate, vat_rate)
    except PricingError as e:
        logger.error(f"Erro de cálculo: {e}")
        return ResultDisplay(
            discounted_price="Error",
            final_amount=f"Error: {e}",
            error=str(e),
        )

    return ResultDisplay(
        discounted_price=format_currency(quote.discounted_price),
        final_amount=format_currency(quote.final_price),
    )
