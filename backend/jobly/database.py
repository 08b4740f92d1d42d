import logging
import re
from typing import Any, Sequence

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from jobly.config import settings

logger = logging.getLogger(__name__)

# Positional "$1", "$2", ... markers produced by jobly.helpers.sql
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")
_ILIKE_RE = re.compile(r"\bILIKE\b", re.IGNORECASE)


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(url: str | None = None) -> Engine:
    url = url or settings.sqlalchemy_url
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _set_sqlite_pragmas)
        return engine
    return create_engine(url, pool_pre_ping=True)


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def query(db: Session, sql: str, params: Sequence[Any] = ()) -> list[dict]:
    """Run ``sql`` written with ``$n`` placeholders and return rows as dicts.

    ``params[0]`` binds ``$1``, ``params[1]`` binds ``$2`` and so on. On SQLite,
    ``ILIKE`` is rewritten to ``LIKE``, which is already case-insensitive there.
    """
    bound_sql = _PLACEHOLDER_RE.sub(r":p\1", sql)
    if db.get_bind().dialect.name == "sqlite":
        bound_sql = _ILIKE_RE.sub("LIKE", bound_sql)
    bind_params = {f"p{idx}": value for idx, value in enumerate(params, start=1)}

    result = db.execute(text(bound_sql), bind_params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]


def init_db(bind: Engine | None = None):
    if bind is None:
        bind = engine
        if settings.database_url is None:
            settings.data_dir.mkdir(parents=True, exist_ok=True)

    # Table classes register themselves on Base.metadata when imported
    import jobly.models  # noqa: F401

    Base.metadata.create_all(bind)
    logger.info("Database schema ready at %s", bind.url.render_as_string(hide_password=True))
