"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from api.dependencies import get_db
from api.schemas import CreateRoundRequest, UpdateRoundRequest
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError
from models import Round

router = APIRouter()


@router.post("/user/{user_id}", response_model=Round, status_code=201)
async def create_round(
    user_id: str,
    req: CreateRoundRequest,
    db: DatabaseManager = Depends(get_db),
):
    round_ = Round(user_id=user_id, **req.model_dump())
    try:
        return await db.rounds.create_round(round_, user_id)
    except IntegrityError as e:
        raise HTTPException(400, str(e))


@router.get("/user/{user_id}", response_model=List[Round])
async def get_rounds_for_user(
    user_id: str,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: DatabaseManager = Depends(get_db),
):
    return await db.rounds.get_rounds_for_user(user_id, limit=limit, offset=offset)


@router.get("/{round_id}", response_model=Round)
async def get_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    round_ = await db.rounds.get_round(round_id)
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_


@router.put("/{round_id}", response_model=Round)
async def update_round(
    round_id: str,
    req: UpdateRoundRequest,
    db: DatabaseManager = Depends(get_db),
):
    """Edit an existing round. Only fields present in the body are changed."""
    updates = {name: getattr(req, name) for name in req.model_fields_set}
    if updates.get("score", 0) is None:
        raise HTTPException(422, "score cannot be null")
    try:
        updated = await db.rounds.update_round(round_id, **updates)
    except IntegrityError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Round not found")
    return updated


@router.delete("/{round_id}", status_code=204)
async def delete_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    deleted = await db.rounds.delete_round(round_id)
    if not deleted:
        raise HTTPException(404, "Round not found")
