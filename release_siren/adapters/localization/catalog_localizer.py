"""Localizer backed by the built-in message catalogs."""

import locale as system_locale
import logging
from typing import Optional

from release_siren.adapters.localization._catalog import CATALOGS, FALLBACK_LANGUAGE
from release_siren.domain.ports import LocalizerPort

logger = logging.getLogger("release_siren.localization")


def _normalize(code: str) -> str:
    # "pt_PT.UTF-8" -> "pt-PT"
    return code.split(".", 1)[0].replace("_", "-")


def system_language() -> Optional[str]:
    try:
        code = system_locale.getlocale()[0]
    except ValueError:
        return None
    return _normalize(code) if code else None


class CatalogLocalizer(LocalizerPort):
    """Resolve keys by exact locale, then base language, then English, then the key itself."""

    def __init__(self, catalogs: dict | None = None, default_locale: Optional[str] = None):
        self.catalogs = catalogs if catalogs is not None else CATALOGS
        self.default_locale = default_locale or system_language()

    def candidates(self, locale: Optional[str]) -> list[str]:
        codes = []
        for code in (locale, self.default_locale):
            if not code:
                continue
            normalized = _normalize(code)
            codes.append(normalized)
            base = normalized.split("-", 1)[0]
            if base != normalized:
                codes.append(base)
        codes.append(FALLBACK_LANGUAGE)
        return codes

    def text(self, key: str, locale: Optional[str] = None) -> str:
        for code in self.candidates(locale):
            catalog = self.catalogs.get(code)
            if catalog and key in catalog:
                return catalog[key]
        logger.debug("No translation for %r (locale=%s)", key, locale)
        return key
