"""Numerals API Routes

Converts numbers to words and exposes locale metadata for clients.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from core.config import settings
from core.errors import raise_result
from core.logging import api_logger
from numerals import get_engine, list_locales

log = api_logger()

router = APIRouter()


# === Request/Response Models ===

class LocaleInfoResponse(BaseModel):
    id: str
    name: str
    nativeName: str
    groupWidth: int
    maxDigits: int


class ConvertRequest(BaseModel):
    number: int | float
    locale: str | None = None


class ConvertResponse(BaseModel):
    locale: str
    number: int
    words: str


# === Endpoints ===

@router.get("/", response_model=list[LocaleInfoResponse])
async def get_available_locales():
    """Get list of available locales."""
    return list_locales()


@router.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest):
    """Convert a number to words, in the default locale unless one is named."""
    return _convert(request.locale or settings.DEFAULT_LOCALE, request.number)


@router.get("/{locale}", response_model=LocaleInfoResponse)
async def get_locale_info(locale: str):
    """Get locale info by id."""
    return get_engine(locale).info()


@router.get("/{locale}/{number}", response_model=ConvertResponse)
async def convert_path(locale: str, number: int | float):
    """Convert a number given in the path."""
    return _convert(locale, number)


def _convert(locale_id: str, number: int | float) -> ConvertResponse:
    engine = get_engine(locale_id)
    result = engine.to_words_result(number)
    raise_result(result)

    words = result.unwrap()
    log.debug("number_converted", locale=engine.locale_id, number=number)
    return ConvertResponse(locale=engine.locale_id, number=int(number), words=words)
