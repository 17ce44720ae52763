# app/agents/workflow.py
from typing import Optional, Tuple

from app.agents.llm.base import LLMClient
from app.agents.schemas import GeneratedRoadmap


SYSTEM_ROADMAP = """You are an expert learning path designer. Create comprehensive, structured learning roadmaps.

Your roadmap should include:
1. A clear title summarizing the learning path
2. Multiple learning phases (3-5 phases)
3. For each phase:
   - A descriptive title
   - A brief description
   - Key milestones or topics to master
4. Realistic time estimates for each phase

Format your response as JSON with this structure:
{
  "title": "string",
  "description": "string",
  "phases": [
    {
      "title": "string",
      "description": "string",
      "duration": "string",
      "milestones": ["string", "string", ...]
    }
  ]
}"""


def build_user_prompt(
    topic: str,
    description: Optional[str],
    difficulty_level: str,
    duration: str,
) -> str:
    lines = [
        f"Create a {difficulty_level} level learning roadmap for: {topic}",
        f"Duration: {duration}",
    ]
    if description:
        lines.append(f"Additional context: {description}")
    lines.append("")
    lines.append(
        f"Make it practical, actionable, and tailored to the {difficulty_level} skill level."
    )
    return "\n".join(lines)


def build_roadmap_prompts(
    topic: str,
    description: Optional[str],
    difficulty_level: str,
    duration: str,
) -> Tuple[str, str]:
    """Return (system, user) prompts. Pure: same inputs, same strings."""
    return SYSTEM_ROADMAP, build_user_prompt(topic, description, difficulty_level, duration)


def generate_roadmap(
    llm: LLMClient,
    *,
    topic: str,
    description: Optional[str],
    difficulty_level: str,
    duration: str,
) -> GeneratedRoadmap:
    system, user = build_roadmap_prompts(topic, description, difficulty_level, duration)
    return llm.generate_structured(GeneratedRoadmap, system=system, user=user)
