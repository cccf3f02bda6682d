from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests

from .config import Settings
from .errors import UpstreamError

log = logging.getLogger(__name__)


def upstream_error_message(data: Any, status: int) -> str:
    """Best-effort message from an upstream error body."""
    candidates: List[Any] = []
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            candidates.append(error.get("message"))
        candidates.append(error)
        candidates.append(data.get("message"))
    for value in candidates:
        if isinstance(value, str) and value.strip():
            return value
    return f"Upstream request failed ({status})"


def _reply_content(data: Any) -> Optional[str]:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


class ChatCompletionClient:
    """POSTs to an OpenAI-compatible <base>/chat/completions endpoint."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _headers(self) -> Dict[str, str]:
        key = self.settings.API_KEY
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {key}",
            "X-API-Key": key,
        }

    def _body(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.settings.AI_MODEL,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.settings.AI_TEMPERATURE,
            "max_tokens": self.settings.AI_MAX_TOKENS,
        }

    def complete(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        """Return the first choice's message content, or None if the reply has none."""
        url = self.settings.completions_url
        log.info("[LLM] requesting %s from %s", self.settings.AI_MODEL, url)
        try:
            r = requests.post(
                url,
                json=self._body(system_prompt, user_prompt),
                headers=self._headers(),
                timeout=self.settings.AI_TIMEOUT,
            )
        except requests.RequestException as e:
            log.error("[LLM] request failed: %s", e, exc_info=True)
            raise UpstreamError(f"Upstream request failed: {e}") from e

        try:
            data = r.json()
        except ValueError:
            data = None

        if not 200 <= r.status_code < 300:
            message = upstream_error_message(data, r.status_code)
            log.warning("[LLM] upstream returned %s: %s", r.status_code, message)
            raise UpstreamError(message)

        return _reply_content(data)
