# spellgate/grammar.py
"""
TextGears grammar-check gateway.

Public API used by app.py
-------------------------
• TextGearsClient(api_key, language="en-US", timeout=10.0, session=None)
• TextGearsClient.check_grammar(text) -> list[dict] | None
      None means "no content": the text was empty and nothing was sent.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import UpstreamError, UpstreamTimeout

TEXTGEARS_URL = "https://api.textgears.com/grammar"

log = logging.getLogger(__name__)


class TextGearsClient:
    def __init__(
        self,
        api_key: str,
        language: str = "en-US",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        url: str = TEXTGEARS_URL,
    ):
        self.api_key  = api_key
        self.language = language
        self.timeout  = timeout
        self.url      = url
        self._session = session or requests.Session()

    def check_grammar(self, text: str) -> Optional[List[Dict[str, Any]]]:
        if len(text) == 0:
            return None

        # form body; long texts overflow URL length limits
        params = {"text": text, "language": self.language, "key": self.api_key}
        try:
            resp = self._session.post(self.url, data=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamTimeout(
                f"TextGears did not answer within {self.timeout:g}s", cause=e
            ) from e
        except requests.RequestException as e:
            raise UpstreamError(f"TextGears request failed: {e}", cause=e) from e

        if resp.status_code >= 400:
            raise UpstreamError(f"TextGears answered HTTP {resp.status_code}")
        try:
            envelope = resp.json()
        except ValueError as e:
            raise UpstreamError("TextGears answered with a non-JSON body", cause=e) from e

        return _extract_errors(envelope)


def _extract_errors(envelope: Any) -> List[Dict[str, Any]]:
    if not isinstance(envelope, dict):
        raise UpstreamError("TextGears response is not an object")
    if envelope.get("status") is False:
        # e.g. {"status": false, "error_code": 600, "description": "Invalid key"}
        raise UpstreamError(envelope.get("description") or "TextGears rejected the request")

    body = envelope.get("response")
    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list):
        raise UpstreamError("TextGears response has no 'response.errors' list")
    log.debug("TextGears reported %d issue(s)", len(errors))
    return errors
