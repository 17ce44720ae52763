## Shared request dependencies
from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from app.agents.llm.base import LLMClient


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_llm(request: Request) -> LLMClient:
    return request.app.state.llm_client
