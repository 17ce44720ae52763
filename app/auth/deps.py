## Current user dependency
from typing import Optional

from fastapi import Depends, Request

from app.auth.identity import Identity, SupabaseIdentityClient
from app.errors import Unauthenticated


def get_identity_client(request: Request) -> SupabaseIdentityClient:
    return request.app.state.identity_client


def extract_bearer_token(header: str) -> Optional[str]:
    value = header.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer":
        value = rest.strip()
    return value or None


def get_current_user(
    request: Request,
    identity_client: SupabaseIdentityClient = Depends(get_identity_client),
) -> Identity:
    header = request.headers.get("Authorization")
    if not header:
        raise Unauthenticated("No authorization header")

    token = extract_bearer_token(header)
    if not token:
        raise Unauthenticated("Unauthorized")

    user = identity_client.resolve(token)
    if user is None:
        raise Unauthenticated("Unauthorized")
    return user
