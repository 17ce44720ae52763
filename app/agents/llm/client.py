from app.agents.llm.base import LLMClient
from app.agents.llm.gateway import GatewayClient
from app.agents.llm.openai_compat import OpenAICompatClient
from app.settings import Settings


def get_llm_client(settings: Settings) -> LLMClient:
    if settings.LLM_PROVIDER == "openai":
        return OpenAICompatClient(
            api_key=settings.LOVABLE_API_KEY,
            base_url=settings.GATEWAY_BASE_URL,
            model=settings.GATEWAY_MODEL,
            timeout=settings.gateway_timeout_seconds,
        )

    return GatewayClient(
        api_key=settings.LOVABLE_API_KEY,
        base_url=settings.GATEWAY_BASE_URL,
        model=settings.GATEWAY_MODEL,
        timeout=settings.gateway_timeout_seconds,
    )
