from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Union
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

Number = Union[int, float, Decimal]


class PriceQuote(BaseModel):
    """Resultado do cálculo: preço com desconto e preço final (com IVA)"""
    model_config = ConfigDict(frozen=True)

    discounted_price: float  # após desconto, antes do IVA
    final_price: float       # após desconto e IVA


class PriceBreakdown(BaseModel):
    """Breakdown detalhado do cálculo de preço"""
    steps: List[Dict[str, Any]]
    notes: Optional[List[str]] = None


class IPriceCalculator(ABC):
    """
    Interface para calculadoras de preço final.

    Todos os métodos recebem base_price (preço base), discount_rate (percentual de
    desconto, ex: 10 para 10%) e vat_rate (percentual de IVA, ex: 21 para 21%).
    """

    @abstractmethod
    def compute(self, base_price: Number, discount_rate: Number, vat_rate: Number) -> PriceQuote:
        """
        Calcula o preço com desconto e o preço final.

        Args:
            base_price: Preço inicial do produto (>= 0)
            discount_rate: Percentual de desconto (0 a 100)
            vat_rate: Percentual de IVA (>= 0, sem limite superior)

        Returns:
            PriceQuote com ambos os valores arredondados a duas casas

        Raises:
            InvalidTypeError: Algum parâmetro não é número
            NegativeValueError: Algum parâmetro é negativo
            DiscountOutOfRangeError: Desconto acima de 100
        """
        pass

    @abstractmethod
    def get_breakdown(self, base_price: Number, discount_rate: Number, vat_rate: Number) -> PriceBreakdown:
        """
        Retorna breakdown detalhado do cálculo.

        Valida as entradas exatamente como compute().
        """
        pass
