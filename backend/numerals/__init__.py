"""Number-to-words conversion for multiple locales.

Provides factory/registry pattern for locale grammar engines.

Usage:
    from numerals import get_engine

    get_engine("en_US").to_words(1234)
    # 'one thousand two hundred and thirty-four'
"""
from .registry import get_engine, create_engine, register, list_locales, available_locales
from .base import NumeralEngine, LocaleDictionary, Trio
from .tokenizer import tokenize
from .errors import NumeralError, NotAnIntegerError, CapacityExceededError, UnknownLocaleError
from .types import Gender, GrammaticalNumber

__all__ = [
    "get_engine",
    "create_engine",
    "register",
    "list_locales",
    "available_locales",
    "NumeralEngine",
    "LocaleDictionary",
    "Trio",
    "tokenize",
    "NumeralError",
    "NotAnIntegerError",
    "CapacityExceededError",
    "UnknownLocaleError",
    "Gender",
    "GrammaticalNumber",
]
