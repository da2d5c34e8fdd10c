"""Conversion between asyncpg rows and the pydantic domain models."""

import json
from typing import Any, List, Optional
from uuid import UUID

from models import Club, HoleRecord, Persona, PersonaSource, Round


def _json_value(value: Any) -> Any:
    """JSONB arrives decoded when the pool codec is installed, as text otherwise."""
    if isinstance(value, str):
        return json.loads(value)
    return value


# ================================================================
# Row -> Model (reads)
# ================================================================

def hole_records_from_json(value: Any) -> Optional[List[HoleRecord]]:
    """golf.rounds.hole_by_hole_data -> list of HoleRecord (None when absent)."""
    data = _json_value(value)
    if data is None:
        return None
    return [HoleRecord.model_validate(item) for item in data]


def round_from_row(row) -> Round:
    """golf.rounds row -> Round model."""
    return Round(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        course_name=row["course_name"],
        score=row["score"],
        fairways_hit=row["fairways_hit"],
        greens_in_regulation=row["greens_in_regulation"],
        putts=row["putts"],
        round_date=row["round_date"],
        tee_position=row["tee_position"],
        hole_by_hole_data=hole_records_from_json(row["hole_by_hole_data"]),
    )


def persona_from_row(row) -> Persona:
    """golf.personas row -> Persona model."""
    return Persona(
        user_id=str(row["user_id"]),
        persona_name=row["persona_name"],
        strengths=_json_value(row["strengths"]) or [],
        weaknesses=_json_value(row["weaknesses"]) or [],
        recommendations=_json_value(row["recommendations"]) or [],
        play_style=row["play_style"] or "",
        mental_game=row["mental_game"] or "",
        practice_focus=_json_value(row["practice_focus"]) or [],
        source=PersonaSource(row["source"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def club_from_row(row) -> Club:
    """golf.clubs row -> Club model."""
    return Club(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        name=row["name"],
        brand=row["brand"],
        model=row["model"],
        loft=row["loft"],
        typical_distance=row["typical_distance"],
        created_at=row["created_at"],
    )


# ================================================================
# Model -> Row dict (writes)
# ================================================================

def hole_records_to_json(holes: Optional[List[HoleRecord]]) -> Optional[list]:
    if holes is None:
        return None
    return [h.model_dump(mode="json") for h in holes]


def round_to_row(round_: Round, user_id: UUID) -> dict:
    """Round -> dict for golf.rounds INSERT."""
    return {
        "user_id": user_id,
        "course_name": round_.course_name,
        "score": round_.score,
        "fairways_hit": round_.fairways_hit,
        "greens_in_regulation": round_.greens_in_regulation,
        "putts": round_.putts,
        "round_date": round_.round_date,
        "tee_position": round_.tee_position,
        "hole_by_hole_data": hole_records_to_json(round_.hole_by_hole_data),
    }


def persona_to_row(persona: Persona) -> dict:
    """Persona -> dict for golf.personas upsert."""
    return {
        "user_id": UUID(persona.user_id),
        "persona_name": persona.persona_name,
        "strengths": list(persona.strengths),
        "weaknesses": list(persona.weaknesses),
        "recommendations": list(persona.recommendations),
        "play_style": persona.play_style,
        "mental_game": persona.mental_game,
        "practice_focus": list(persona.practice_focus),
        "source": persona.source.value,
    }


def club_to_row(club: Club, user_id: UUID) -> dict:
    """Club -> dict for golf.clubs INSERT."""
    return {
        "user_id": user_id,
        "name": club.name,
        "brand": club.brand,
        "model": club.model,
        "loft": club.loft,
        "typical_distance": club.typical_distance,
    }


def parse_uuid(value: str) -> Optional[UUID]:
    """UUID from a path/query string, or None when it is malformed."""
    try:
        return UUID(str(value))
    except ValueError:
        return None
