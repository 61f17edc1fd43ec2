# -*- coding: utf-8 -*-
import logging
import os
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from config import settings
# Adaptador de interface (formulário -> textos de resultado)
from display import ResultDisplay, render_results
# Importar pricing module
from pricing import PriceCalculator, PricingError

logger = logging.getLogger(__name__)

app = FastAPI(title="Final Price Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Static
STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")
app.mount("/static", StaticFiles(directory=STATIC_DIR, html=True), name="static")

calculator = PriceCalculator()


@app.get("/", include_in_schema=False)
async def root_index():
    # Serve a página da calculadora em /static/index.html
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))


@app.get("/health")
async def health():
    return {"status": "ok", "app": settings.app_slug, "version": app.version}


def _pricing_error(e: PricingError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": str(e), "error_type": type(e).__name__},
    )


# ============================================================================
# PRICING ENDPOINTS
# ============================================================================

class PriceQuoteRequest(BaseModel):
    """Request para cálculo do preço final"""
    # Any: a checagem de tipo é feita pelo core, não pelo schema
    base_price: Any = Field(..., description="Preço base do produto (>= 0)")
    discount_rate: Any = Field(..., description="Percentual de desconto (0 a 100, ex: 10 = 10%)")
    vat_rate: Any = Field(..., description="Percentual de IVA (>= 0, ex: 21 = 21%)")


class PriceQuoteResponse(BaseModel):
    """Resposta com preço descontado e preço final"""
    discounted_price: float
    final_price: float


class PriceBreakdownResponse(BaseModel):
    steps: List[Dict[str, Any]]
    notes: Optional[List[str]] = None


@app.post("/pricing/quote", response_model=PriceQuoteResponse)
async def pricing_quote(request: PriceQuoteRequest):
    """
    Calcula o preço com desconto e o preço final com IVA.

    Args:
        request: PriceQuoteRequest com base_price, discount_rate e vat_rate

    Returns:
        PriceQuoteResponse com valores arredondados a duas casas

    Raises:
        422: Parâmetro não numérico, negativo ou desconto acima de 100%
    """
    try:
        quote = calculator.compute(request.base_price, request.discount_rate, request.vat_rate)
    except PricingError as e:
        logger.info(f"Cotação rejeitada: {type(e).__name__}: {e}")
        raise _pricing_error(e)

    return PriceQuoteResponse(**quote.model_dump())


@app.get("/pricing/breakdown", response_model=PriceBreakdownResponse)
async def pricing_breakdown(
        base_price: float = Query(..., description="Preço base do produto"),
        discount_rate: float = Query(..., description="Percentual de desconto"),
        vat_rate: float = Query(..., description="Percentual de IVA"),
):
    """Retorna o passo a passo do cálculo (base, desconto, IVA, final)"""
    try:
        breakdown = calculator.get_breakdown(base_price, discount_rate, vat_rate)
    except PricingError as e:
        raise _pricing_error(e)

    return PriceBreakdownResponse(**breakdown.model_dump())


@app.get("/pricing/display", response_model=ResultDisplay)
async def pricing_display(
        base_price: str = Query("", description="Texto do campo preço base"),
        discount: str = Query("", description="Texto do campo desconto"),
        vat_rate: str = Query("", description="Texto do campo IVA"),
):
    """
    Textos de resultado para o formulário, a partir dos valores crus dos campos.

    Sempre 200: campos vazios viram placeholders e erros de validação viram
    o estado de erro da página.
    """
    return render_results(base_price, discount, vat_rate)


# ========= MAIN PARA RODAR DEBUGANDO =========


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=settings.host, port=settings.port, reload=settings.dev_mode)
