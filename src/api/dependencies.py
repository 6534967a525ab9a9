"""FastAPI dependencies: one session, repository and service per request."""

from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService


def get_repository(db: Session = Depends(get_db)) -> GameRepository:
    return SQLGameRepository(db)


def get_service(repository: GameRepository = Depends(get_repository)) -> GameService:
    # retry policy comes from the settings
    return GameService(repository)
