## Base LLM Client Interface
import json
import logging
from abc import ABC, abstractmethod
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.errors import MalformedGeneration

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, *, system: str, user: str, json_mode: bool = False) -> str:
        raise NotImplementedError

    def generate_structured(self, schema: Type[T], *, system: str, user: str) -> T:
        """
        Ask the model for a JSON object, then validate it against ``schema``.

        One attempt only. A reply that is not JSON, or JSON of the wrong
        shape, raises MalformedGeneration.
        """
        text = self.generate_text(system=system, user=user, json_mode=True)

        try:
            data = json.loads(text)
        except ValueError as e:
            logger.warning("Model reply is not JSON: %s", e)
            raise MalformedGeneration("Generated content was not valid JSON") from e

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "Model reply failed %s validation (%d errors): %s",
                schema.__name__, e.error_count(), e.errors(include_url=False)[:5],
            )
            raise MalformedGeneration("Generated content did not match the expected shape") from e
