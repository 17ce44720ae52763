## Roadmap persistence
import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.agents.schemas import GeneratedRoadmap
from app.db.models.roadmap import Roadmap
from app.errors import PersistenceError
from app.roadmaps.schemas import RoadmapRequest

logger = logging.getLogger(__name__)


def save_roadmap(
    db: Session,
    *,
    user_id: uuid.UUID,
    req: RoadmapRequest,
    generated: GeneratedRoadmap,
) -> Roadmap:
    rm = Roadmap(
        user_id=user_id,
        title=generated.title,
        description=generated.description or req.description or "",
        topic=req.topic,
        difficulty_level=req.difficulty_level,
        duration=req.duration,
        content=generated.model_dump(mode="json", exclude_unset=True),
    )
    try:
        db.add(rm)
        db.commit()
        db.refresh(rm)  # pick up created_at from the server default
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error saving roadmap for user %s: %s", user_id, e)
        raise PersistenceError("Failed to save roadmap") from e
    return rm


def list_roadmaps(db: Session, user_id: uuid.UUID) -> List[Roadmap]:
    try:
        return (
            db.query(Roadmap)
            .filter(Roadmap.user_id == user_id)
            .order_by(Roadmap.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Database error listing roadmaps for user %s: %s", user_id, e)
        raise PersistenceError("Failed to load roadmaps") from e


def get_roadmap(db: Session, roadmap_id: uuid.UUID, user_id: uuid.UUID) -> Optional[Roadmap]:
    try:
        return (
            db.query(Roadmap)
            .filter(Roadmap.id == roadmap_id, Roadmap.user_id == user_id)
            .first()
        )
    except SQLAlchemyError as e:
        logger.error("Database error loading roadmap %s: %s", roadmap_id, e)
        raise PersistenceError("Failed to load roadmap") from e
