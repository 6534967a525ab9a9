"""Implementation of (Game)Repository using SQLAlchemy"""

from dataclasses import replace
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.base import Executable

from src.core.exceptions import GameStateError, VersionConflictError
from src.core.models import GameModel
from src.core.shared_types import Player, Status
from src.db.schema import DBGame, utc_now


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game and return the stored data."""
        game_db = DBGame(
            id=game.game_id,
            board=game.board,
            next_player=game.next_player,
            status=game.status,
            version=0,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def commit_game(self, game: GameModel, expected_version: int) -> GameModel | None:
        """Compare-and-swap on the version column, executed as a single UPDATE."""
        new_version = expected_version + 1
        query = (
            update(DBGame)
            .where(DBGame.id == game.game_id, DBGame.version == expected_version)
            .values(
                board=game.board,
                next_player=game.next_player,
                status=game.status,
                version=new_version,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        rowcount = self._write(query).rowcount
        self.db.commit()

        if rowcount == 0:
            if not self.exists(game.game_id):
                return None
            raise VersionConflictError(
                f"Game {game.game_id} was modified concurrently (expected version {expected_version})."
            )
        # the values the UPDATE wrote
        return replace(game, version=new_version)

    def overwrite_game(self, game: GameModel) -> GameModel | None:
        """Unconditional write. The new version is computed by the database and returned by the same statement."""
        query = (
            update(DBGame)
            .where(DBGame.id == game.game_id)
            .values(
                board=game.board,
                next_player=game.next_player,
                status=game.status,
                version=DBGame.version + 1,
                updated_at=utc_now(),
            )
            .returning(DBGame.version)
            .execution_options(synchronize_session=False)
        )
        new_version = self._write(query).scalar_one_or_none()
        self.db.commit()

        if new_version is None:
            return None
        return replace(game, version=new_version)

    def exists(self, game_id: UUID) -> bool:
        query = select(func.count()).select_from(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query) > 0

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def page_games(self, offset: int, limit: int) -> tuple[list[GameModel], int]:
        total = self.db.scalar(select(func.count()).select_from(DBGame))
        query = (
            select(DBGame)
            .order_by(DBGame.created_at, DBGame.id)
            .offset(offset)
            .limit(limit)
        )
        games = [self._to_model(game_db) for game_db in self.db.scalars(query)]
        return games, total

    def _write(self, query: Executable) -> Result:
        """Execute a write, leaving the session usable if the database refuses it."""
        try:
            return self.db.execute(query)
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        # another session may have written since this one last looked: always re-read the row
        query = (
            select(DBGame)
            .where(DBGame.id == game_id)
            .execution_options(populate_existing=True)
        )
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        try:
            next_player = Player(game_db.next_player)
            status = Status(game_db.status)
        except ValueError as e:
            raise GameStateError(f"Corrupted record for game {game_db.id}") from e
        return GameModel(
            game_id=game_db.id,
            board=game_db.board,
            next_player=next_player,
            status=status,
            version=game_db.version,
        )
