"""HTTP adapter for the release lookup endpoint."""

import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from release_siren.config import DEFAULT_TIMEOUT
from release_siren.domain.errors import FetchError
from release_siren.domain.model import VersionInfo
from release_siren.domain.ports import VersionLookupPort
from release_siren.version import __version__

logger = logging.getLogger("release_siren.lookup")

USER_AGENT = f"release-siren/{__version__}"


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_lookup_payload(payload, endpoint: str) -> Optional[VersionInfo]:
    """Extract the first entry of ``{"results": [...]}``.

    Returns None for an empty result list.
    """
    if not isinstance(payload, dict):
        raise FetchError.format(endpoint, "lookup payload is not a JSON object")
    results = payload.get("results")
    if not isinstance(results, list):
        raise FetchError.format(endpoint, "lookup payload has no 'results' list")
    if not results:
        return None
    first = results[0]
    if not isinstance(first, dict):
        raise FetchError.format(endpoint, "lookup result is not a JSON object")
    return VersionInfo(
        version=_optional_str(first.get("version")),
        mandatory_version=_optional_str(first.get("mandatory_version")),
    )


class HttpLookupAdapter(VersionLookupPort):

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def fetch(self, endpoint: str) -> Optional[VersionInfo]:
        req = urllib.request.Request(
            endpoint,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as exc:
            # The server answered, just not with a lookup payload.
            raise FetchError.format(endpoint, f"HTTP {exc.code} from {endpoint}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise FetchError.transport(endpoint, f"request to {endpoint} failed: {exc}") from exc

        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise FetchError.format(endpoint, f"invalid JSON from {endpoint}: {exc}") from exc

        logger.debug("Lookup payload from %s: %s", endpoint, payload)
        return parse_lookup_payload(payload, endpoint)
