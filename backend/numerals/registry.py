"""Locale engine registry - factory pattern for locale support."""
from core.logging import registry_logger
from .base import NumeralEngine
from .errors import UnknownLocaleError

log = registry_logger()

_ENGINES: dict[str, NumeralEngine] = {}


def _normalize(locale_id: str) -> str:
    return locale_id.strip().replace("-", "_").lower()


def register(engine: NumeralEngine) -> None:
    """Register a locale engine."""
    _ENGINES[_normalize(engine.locale_id)] = engine
    log.debug("locale_registered", locale=engine.locale_id)


def get_engine(locale_id: str) -> NumeralEngine:
    """Get the engine for a locale id ('en_US', 'en-us' and 'EN_US' are equivalent)."""
    engine = _ENGINES.get(_normalize(locale_id))
    if engine is None:
        available = available_locales()
        log.info("locale_unknown", locale=locale_id, available=available)
        raise UnknownLocaleError(locale_id, available)
    return engine


create_engine = get_engine


def available_locales() -> list[str]:
    """Ids of all registered locales."""
    return [engine.locale_id for engine in _ENGINES.values()]


def list_locales() -> list[dict]:
    """List all registered locales."""
    return [engine.info() for engine in _ENGINES.values()]


def _auto_register() -> None:
    """Auto-register locale engines on import."""
    from .locales import ALL_ENGINES

    for engine_cls in ALL_ENGINES:
        register(engine_cls())


_auto_register()
