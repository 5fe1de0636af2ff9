"""
Categories API Endpoints
Read-only listing of joke categories (provisioned by the seed loader).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.category import CategoryResponse
from app.services.joke_store import JokeStore


router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
def get_categories(db: Session = Depends(get_db)):
    """
    Get all categories.
    Use their ids as categoryId when adding or updating jokes.
    """
    return JokeStore(db).categories.find_all()
