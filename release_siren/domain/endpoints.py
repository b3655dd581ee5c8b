"""Lookup and store URLs for an app identifier."""

from typing import Optional
from urllib.parse import urlencode

DEFAULT_LOOKUP_URL = "https://itunes.apple.com/lookup"
STORE_PAGE_URL = "https://itunes.apple.com/app/id{app_id}"


def _query(app_id: str, region_code: Optional[str]) -> str:
    params = {"id": app_id}
    if region_code:
        params["country"] = region_code
    return urlencode(params)


def default_endpoint(app_id: str, region_code: Optional[str] = None) -> str:
    return f"{DEFAULT_LOOKUP_URL}?{_query(app_id, region_code)}"


def custom_endpoint(template: str, app_id: str, region_code: Optional[str] = None) -> str:
    """Expand ``{app_id}`` in the template and append the lookup query.

    Raises ValueError when the template uses any other placeholder.
    """
    try:
        base = template.format(app_id=app_id)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"custom endpoint template {template!r} is not usable: {exc!r}") from exc
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{_query(app_id, region_code)}"


def store_page_url(app_id: str) -> str:
    return STORE_PAGE_URL.format(app_id=app_id)
