## Request / response models for roadmap endpoints
import logging
import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class RoadmapRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str = ""
    description: Optional[str] = None
    difficulty_level: str = Field("beginner", alias="difficultyLevel")
    duration: str = ""


class RoadmapOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str
    topic: str
    difficulty_level: str
    duration: str
    content: dict[str, Any]
    created_at: datetime


class PhaseView(BaseModel):
    title: str = ""
    description: str = ""
    duration: str = ""
    milestones: List[str] = Field(default_factory=list)


class RoadmapDetail(RoadmapOut):
    phases: List[PhaseView] = Field(default_factory=list)


def phases_from_content(content: Any) -> List[PhaseView]:
    """
    Decode the phases of a stored content document for display.

    Stored documents are not re-validated: a missing or non-list ``phases``
    reads as no phases, and entries that are not objects are skipped.
    """
    if not isinstance(content, dict):
        return []
    raw = content.get("phases")
    if not isinstance(raw, list):
        return []

    phases = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            continue
        try:
            phases.append(PhaseView.model_validate(item))
        except ValidationError as e:
            logger.debug("Skipping unreadable phase %d: %s", i, e)
    return phases
