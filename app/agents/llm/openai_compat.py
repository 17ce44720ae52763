import logging

import httpx
from openai import APIError, APIResponseValidationError, APIStatusError, OpenAI
from openai.types.chat import ChatCompletion

from app.agents.llm.base import LLMClient
from app.errors import GatewayUnavailable, MalformedGeneration

logger = logging.getLogger(__name__)


class OpenAICompatClient(LLMClient):
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 120.0,
        http_client: httpx.Client | None = None,
    ):
        # max_retries=0: a failed generation is reported, the user resubmits
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model

    def generate_text(self, *, system: str, user: str, json_mode: bool = False) -> str:
        extra = {"response_format": {"type": "json_object"}} if json_mode else {}
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                **extra,
            )
        except APIStatusError as e:
            logger.error("AI gateway error: status=%s body=%s", e.status_code, e.response.text[:2000])
            raise GatewayUnavailable("Failed to generate roadmap") from e
        except APIResponseValidationError as e:
            logger.error("AI gateway returned an unexpected body: %s", e.response.text[:2000])
            raise MalformedGeneration("Generated content was not valid JSON") from e
        except APIError as e:
            logger.error("AI gateway request failed: %s: %s", type(e).__name__, e)
            raise GatewayUnavailable("Failed to generate roadmap") from e

        # A non-JSON success body comes back from the SDK as plain text
        if not isinstance(resp, ChatCompletion):
            logger.error("AI gateway returned an unexpected body: %s", str(resp)[:2000])
            raise MalformedGeneration("Generated content was not valid JSON")
        if not resp.choices or resp.choices[0].message.content is None:
            raise MalformedGeneration("Generated content was not valid JSON")
        return resp.choices[0].message.content.strip()
