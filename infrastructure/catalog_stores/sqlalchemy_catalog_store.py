"""Relational catalog store built on SQLAlchemy Core."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import structlog
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    create_engine,
    delete,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from application.ports.catalog_store import CatalogStore
from domain.entities.genre import Genre
from domain.entities.song import Song
from domain.exceptions import ConflictError, InfrastructureError, RecordNotFoundError

if TYPE_CHECKING:
    from sqlalchemy import Row, Select
    from sqlalchemy.engine import Connection, Engine

    from application.dtos.song_dtos import SongFields

logger = structlog.get_logger()

metadata = MetaData()

genres_table = Table(
    "genres",
    metadata,
    Column("genre_id", Uuid, primary_key=True),
    Column("genre_name", String(255), nullable=False, unique=True),
)

# genre_id carries no foreign key; DeleteGenreUseCase guards references
songs_table = Table(
    "songs",
    metadata,
    Column("song_id", Uuid, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("artist", String(255), nullable=False),
    Column("genre_id", Uuid, nullable=True, index=True),
    Column("release_year", Integer, nullable=True),
    Column("audio_file_path", Text, nullable=True),
    Column("image_path", Text, nullable=True),
)


def create_catalog_engine(
    database_url: str,
    *,
    pool_size: int = 5,
    pool_recycle: int = 300,
) -> Engine:
    """Create an engine with a bounded connection pool.

    SQLite URLs get the driver defaults since pool sizing does not apply.
    """
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=0,
        pool_recycle=pool_recycle,
        pool_pre_ping=True,
    )


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy errors as domain exceptions."""
    try:
        yield
    except IntegrityError as e:
        msg = f"{operation}: {e.orig}"
        raise ConflictError(msg) from e
    except SQLAlchemyError as e:
        logger.exception("catalog_store_error", operation=operation)
        msg = f"{operation}: {e!s}"
        raise InfrastructureError(msg) from e


class SqlAlchemyCatalogStore(CatalogStore):
    """Catalog store over the ``songs`` and ``genres`` tables."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_schema(self) -> None:
        """Create the catalog tables if they do not exist yet."""
        with _translate_errors("create_schema"):
            metadata.create_all(self.engine)

    # Songs

    @staticmethod
    def _song_query() -> Select:
        return select(
            songs_table.c.song_id,
            songs_table.c.title,
            songs_table.c.artist,
            songs_table.c.genre_id,
            genres_table.c.genre_name,
            songs_table.c.release_year,
            songs_table.c.audio_file_path,
            songs_table.c.image_path,
        ).select_from(
            songs_table.outerjoin(
                genres_table,
                songs_table.c.genre_id == genres_table.c.genre_id,
            ),
        )

    @staticmethod
    def _to_song(row: Row) -> Song:
        return Song.model_validate(row._asdict())

    def _fetch_song(self, conn: Connection, song_id: UUID) -> Song:
        row = conn.execute(
            self._song_query().where(songs_table.c.song_id == song_id),
        ).first()
        if row is None:
            msg = f"Song with id {song_id} not found"
            raise RecordNotFoundError(msg)
        return self._to_song(row)

    def list_songs(self) -> list[Song]:
        with _translate_errors("list_songs"), self.engine.connect() as conn:
            rows = conn.execute(self._song_query().order_by(songs_table.c.title)).all()
        return [self._to_song(row) for row in rows]

    def get_song(self, song_id: UUID) -> Song:
        with _translate_errors("get_song"), self.engine.connect() as conn:
            return self._fetch_song(conn, song_id)

    def insert_song(self, fields: SongFields) -> Song:
        song_id = uuid4()
        with _translate_errors("insert_song"), self.engine.begin() as conn:
            conn.execute(insert(songs_table).values(song_id=song_id, **fields.model_dump()))
            return self._fetch_song(conn, song_id)

    def update_song(self, song_id: UUID, fields: SongFields) -> Song:
        with _translate_errors("update_song"), self.engine.begin() as conn:
            result = conn.execute(
                update(songs_table)
                .where(songs_table.c.song_id == song_id)
                .values(**fields.model_dump()),
            )
            if result.rowcount == 0:
                msg = f"Song with id {song_id} not found"
                raise RecordNotFoundError(msg)
            return self._fetch_song(conn, song_id)

    def delete_song(self, song_id: UUID) -> int:
        with _translate_errors("delete_song"), self.engine.begin() as conn:
            result = conn.execute(delete(songs_table).where(songs_table.c.song_id == song_id))
            return result.rowcount

    # Genres

    def list_genres(self) -> list[Genre]:
        with _translate_errors("list_genres"), self.engine.connect() as conn:
            rows = conn.execute(select(genres_table).order_by(genres_table.c.genre_name)).all()
        return [Genre.model_validate(row._asdict()) for row in rows]

    def get_genre(self, genre_id: UUID) -> Genre:
        with _translate_errors("get_genre"), self.engine.connect() as conn:
            row = conn.execute(
                select(genres_table).where(genres_table.c.genre_id == genre_id),
            ).first()
        if row is None:
            msg = f"Genre with id {genre_id} not found"
            raise RecordNotFoundError(msg)
        return Genre.model_validate(row._asdict())

    def exists_genre(self, genre_id: UUID) -> bool:
        with _translate_errors("exists_genre"), self.engine.connect() as conn:
            found = conn.execute(
                select(genres_table.c.genre_id).where(genres_table.c.genre_id == genre_id),
            ).first()
        return found is not None

    def insert_genre(self, genre_name: str) -> Genre:
        genre_id = uuid4()
        with _translate_errors("insert_genre"), self.engine.begin() as conn:
            conn.execute(insert(genres_table).values(genre_id=genre_id, genre_name=genre_name))
        return Genre(genre_id=genre_id, genre_name=genre_name)

    def update_genre(self, genre_id: UUID, genre_name: str) -> Genre:
        with _translate_errors("update_genre"), self.engine.begin() as conn:
            result = conn.execute(
                update(genres_table)
                .where(genres_table.c.genre_id == genre_id)
                .values(genre_name=genre_name),
            )
            if result.rowcount == 0:
                msg = f"Genre with id {genre_id} not found"
                raise RecordNotFoundError(msg)
        return Genre(genre_id=genre_id, genre_name=genre_name)

    def delete_genre(self, genre_id: UUID) -> int:
        with _translate_errors("delete_genre"), self.engine.begin() as conn:
            result = conn.execute(delete(genres_table).where(genres_table.c.genre_id == genre_id))
            return result.rowcount

    def count_songs_by_genre(self, genre_id: UUID) -> int:
        with _translate_errors("count_songs_by_genre"), self.engine.connect() as conn:
            count = conn.execute(
                select(func.count()).select_from(songs_table).where(songs_table.c.genre_id == genre_id),
            ).scalar_one()
        return int(count)
