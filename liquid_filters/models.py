from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LocaleConventions(BaseModel):
    """
    Monetary formatting conventions for one locale.

    The sign-dependent flags also accept the POSIX localeconv() key names
    (p_cs_precedes, n_sep_by_space, ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    decimal_point: str
    thousands_sep: str
    frac_digits: int = Field(ge=0)
    currency_symbol: str
    positive_cs_precedes: bool = Field(alias="p_cs_precedes")
    negative_cs_precedes: bool = Field(alias="n_cs_precedes")
    positive_sep_by_space: bool = Field(alias="p_sep_by_space")
    negative_sep_by_space: bool = Field(alias="n_sep_by_space")


class HandleRequest(BaseModel):
    text: Optional[str] = None


class HandleResponse(BaseModel):
    handle: str


class MoneyRequest(BaseModel):
    amount: Union[Decimal, str]
    conventions: Optional[LocaleConventions] = None
    with_currency: bool = True


class MoneyResponse(BaseModel):
    formatted: str


class HealthResponse(BaseModel):
    ok: bool = True
