import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .currency import money_with_currency, money_without_currency
from .errors import FilterError
from .log import setup_logging
from .models import (
    HandleRequest,
    HandleResponse,
    HealthResponse,
    MoneyRequest,
    MoneyResponse,
)
from .slug import handle

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="liquid-filters",
    description="Handle and locale-aware money filters for template rendering",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/handle", response_model=HandleResponse)
def handle_text(body: HandleRequest):
    return {"handle": handle(body.text)}

@app.post("/money", response_model=MoneyResponse)
def format_money(body: MoneyRequest):
    render = money_with_currency if body.with_currency else money_without_currency
    try:
        formatted = render(body.amount, body.conventions)
    except FilterError as exc:
        logger.warning("money filter failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))
    return {"formatted": formatted}
