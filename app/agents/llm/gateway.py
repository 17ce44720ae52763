import logging

import httpx

from app.agents.llm.base import LLMClient
from app.errors import GatewayUnavailable, MalformedGeneration

logger = logging.getLogger(__name__)

# Upstream bodies can be large HTML error pages
MAX_LOGGED_BODY = 2000


class GatewayClient(LLMClient):
    """OpenAI-compatible chat completions over plain httpx."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, *, system: str, user: str, json_mode: bool = False) -> str:
        # POST {base_url}/chat/completions with OpenAI message format
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("AI gateway request failed: %s: %s", type(e).__name__, e)
            raise GatewayUnavailable("Failed to generate roadmap") from e

        if not r.is_success:
            logger.error("AI gateway error: status=%s body=%s", r.status_code, r.text[:MAX_LOGGED_BODY])
            raise GatewayUnavailable("Failed to generate roadmap")

        try:
            data = r.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("AI gateway returned an unexpected body: %s", r.text[:MAX_LOGGED_BODY])
            raise MalformedGeneration("Generated content was not valid JSON") from e

        if not isinstance(content, str):
            raise MalformedGeneration("Generated content was not valid JSON")
        return content
