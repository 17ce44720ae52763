## Pydantic Schemas for Structured Output
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# extra="allow": stored content keeps whatever else the model sent
class Phase(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: str
    duration: str
    milestones: List[str]


class GeneratedRoadmap(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: Optional[str] = None
    phases: List[Phase]
