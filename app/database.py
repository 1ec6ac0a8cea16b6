# app/database.py
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Database connection
#
# - PostgreSQL: DATABASE_SSLMODE (e.g. "require") is appended
#   to the URL when it does not already carry one.
# - SQLite: the connection is shared across FastAPI's worker
#   threads, and foreign keys are switched on per connection
#   so cart rows cascade with their user / product.
# - pool_pre_ping=True: validate connections before using them
# ---------------------------------------------------------


def build_database_url(url: str, sslmode: str | None) -> str:
    """Append sslmode to a PostgreSQL URL unless it already has one."""
    if not sslmode or not url.startswith("postgresql") or "sslmode=" in url:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}sslmode={sslmode}"


def make_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=echo, pool_pre_ping=True, **kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = make_engine(
    build_database_url(settings.DATABASE_URL, settings.DATABASE_SSLMODE),
    echo=settings.DATABASE_ECHO,
)


def create_db_and_tables(bind: Engine = engine) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(bind)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
