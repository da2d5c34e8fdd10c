"""Golf bag (club) API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from api.dependencies import get_db
from api.schemas import CreateClubRequest, UpdateClubRequest
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError
from models import Club

router = APIRouter()


@router.post("/user/{user_id}", response_model=Club, status_code=201)
async def create_club(
    user_id: str,
    req: CreateClubRequest,
    db: DatabaseManager = Depends(get_db),
):
    club = Club(user_id=user_id, **req.model_dump())
    try:
        return await db.clubs.create_club(club, user_id)
    except IntegrityError as e:
        raise HTTPException(400, str(e))


@router.get("/user/{user_id}", response_model=List[Club])
async def get_clubs_for_user(user_id: str, db: DatabaseManager = Depends(get_db)):
    return await db.clubs.get_clubs_for_user(user_id)


@router.get("/{club_id}", response_model=Club)
async def get_club(club_id: str, db: DatabaseManager = Depends(get_db)):
    club = await db.clubs.get_club(club_id)
    if not club:
        raise HTTPException(404, "Club not found")
    return club


@router.put("/{club_id}", response_model=Club)
async def update_club(
    club_id: str,
    req: UpdateClubRequest,
    db: DatabaseManager = Depends(get_db),
):
    updates = {name: getattr(req, name) for name in req.model_fields_set}
    if "name" in updates and updates["name"] is None:
        raise HTTPException(422, "name cannot be null")
    try:
        updated = await db.clubs.update_club(club_id, **updates)
    except IntegrityError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Club not found")
    return updated


@router.delete("/{club_id}", status_code=204)
async def delete_club(club_id: str, db: DatabaseManager = Depends(get_db)):
    deleted = await db.clubs.delete_club(club_id)
    if not deleted:
        raise HTTPException(404, "Club not found")
