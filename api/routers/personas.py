"""Golfer persona endpoints."""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from analytics.metrics import calculate_performance_metrics
from analytics.trends import recent_trends
from api.config import Settings
from api.dependencies import get_db, get_persona_classifier, get_settings
from api.schemas import PersonaResponse
from database.db_manager import DatabaseManager
from llm.strategies import PersonaClassifier
from models import Persona

logger = logging.getLogger(__name__)

router = APIRouter()


async def generate_persona_for_user(
    user_id: str,
    db: DatabaseManager,
    classifier: PersonaClassifier,
    *,
    min_rounds: int = 2,
    window: int = 10,
) -> Optional[Persona]:
    """
    Classify the user's newest rounds and store the result.

    Returns None, without touching storage, when fewer than ``min_rounds``
    rounds exist.
    """
    rounds = await db.rounds.get_rounds_for_user(user_id, limit=window, offset=0)
    if len(rounds) < min_rounds:
        logger.info("User %s has %d round(s); persona needs %d", user_id, len(rounds), min_rounds)
        return None

    metrics = calculate_performance_metrics(rounds, recent_trends=recent_trends(rounds, window))
    loop = asyncio.get_running_loop()
    persona = await loop.run_in_executor(None, classifier.classify, metrics, user_id)
    return await db.personas.upsert_persona(persona)


@router.post("/{user_id}", response_model=PersonaResponse)
async def generate_persona(
    user_id: str,
    db: DatabaseManager = Depends(get_db),
    classifier: PersonaClassifier = Depends(get_persona_classifier),
    settings: Settings = Depends(get_settings),
):
    persona = await generate_persona_for_user(
        user_id,
        db,
        classifier,
        min_rounds=settings.persona_min_rounds,
        window=settings.persona_round_window,
    )
    if persona is None:
        return PersonaResponse(
            persona=None,
            message="Play more rounds to generate your golfer persona",
        )
    return PersonaResponse(persona=persona)


@router.get("/{user_id}", response_model=Persona)
async def get_persona(user_id: str, db: DatabaseManager = Depends(get_db)):
    persona = await db.personas.get_persona(user_id)
    if not persona:
        raise HTTPException(404, "Persona not found")
    return persona
