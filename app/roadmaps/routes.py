# Roadmap API
import logging
import uuid

from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.agents.llm.base import LLMClient
from app.agents.workflow import generate_roadmap
from app.auth.deps import get_current_user
from app.auth.identity import Identity
from app.deps import get_db, get_llm
from app.errors import InvalidRequest
from app.responses import CORS_HEADERS, cors_json, error_envelope
from app.roadmaps.schemas import RoadmapDetail, RoadmapOut, RoadmapRequest, phases_from_content
from app.roadmaps.store import get_roadmap, list_roadmaps, save_roadmap

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/generate-roadmap")
@router.options("/roadmaps")
@router.options("/roadmaps/{roadmap_id}")
def preflight():
    return Response(headers=CORS_HEADERS)


@router.post("/generate-roadmap")
def create_generated_roadmap(
    user: Identity = Depends(get_current_user),
    req: RoadmapRequest = Body(...),
    llm: LLMClient = Depends(get_llm),
    db: Session = Depends(get_db),
):
    if not req.topic.strip():
        raise InvalidRequest("Topic is required")

    generated = generate_roadmap(
        llm,
        topic=req.topic,
        description=req.description,
        difficulty_level=req.difficulty_level,
        duration=req.duration,
    )

    rm = save_roadmap(db, user_id=user.id, req=req, generated=generated)
    logger.info("Roadmap %s generated for user %s (%d phases)", rm.id, user.id, len(generated.phases))

    return cors_json(RoadmapOut.model_validate(rm))


@router.get("/roadmaps")
def list_user_roadmaps(
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    items = list_roadmaps(db, user.id)
    return cors_json([RoadmapOut.model_validate(rm) for rm in items])


@router.get("/roadmaps/{roadmap_id}")
def roadmap_detail(
    roadmap_id: uuid.UUID,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    rm = get_roadmap(db, roadmap_id, user.id)
    if not rm:
        return error_envelope("Roadmap not found", status_code=404)

    out = RoadmapOut.model_validate(rm)
    return cors_json(RoadmapDetail(**out.model_dump(), phases=phases_from_content(rm.content)))
