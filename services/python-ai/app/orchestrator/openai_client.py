import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.errors import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_ERROR = "AI service error"


def extract_provider_error(body: str) -> str:
    """Best-effort ``error.message`` from a provider error body."""
    try:
        payload = json.loads(body)
    except ValueError:
        return DEFAULT_PROVIDER_ERROR
    if not isinstance(payload, dict):
        return DEFAULT_PROVIDER_ERROR
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
        return error["message"]
    return DEFAULT_PROVIDER_ERROR


def extract_reply_text(payload: Dict[str, Any]) -> str:
    choices = payload.get("choices") or []
    if not choices:
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content")
    return content if isinstance(content, str) else ""


class OpenAIChatClient:
    """Chat-completion calls against the OpenAI REST API.

    One instance wraps one ``httpx.AsyncClient``; use it as an async context
    manager so the connection pool is closed with the request.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
        )

    async def __aenter__(self) -> "OpenAIChatClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def complete(self, prompt: str, *, model: str, temperature: float, max_tokens: int) -> str:
        response = await self._http.post(
            "/chat/completions",
            json={
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
        )
        if not response.is_success:
            logger.error("OpenAI error %s: %s", response.status_code, response.text)
            raise ProviderError(extract_provider_error(response.text), upstream_status=response.status_code)
        return extract_reply_text(response.json())
