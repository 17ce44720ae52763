## Identity service client (Supabase auth)
import logging
import uuid
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    id: uuid.UUID
    email: Optional[str] = None


class SupabaseIdentityClient:
    """Resolves a bearer token to the user it was issued for, or None."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def resolve(self, token: str) -> Optional[Identity]:
        url = f"{self.base_url}/auth/v1/user"
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {token}",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Identity lookup failed: %s: %s", type(e).__name__, e)
            return None

        if r.status_code != 200:
            logger.info("Identity service rejected token: status=%s", r.status_code)
            return None

        try:
            return Identity.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Identity service returned an unusable user: %s", e)
            return None
