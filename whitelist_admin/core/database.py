from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from whitelist_admin.core.config import DATABASE_URL


class Base(DeclarativeBase):
    pass


def _ensure_sqlite_dir(database_url: str) -> None:
    if not database_url.startswith("sqlite:///"):
        return
    path = database_url.replace("sqlite:///", "", 1)
    if path.startswith("./"):
        path = path[2:]
    if not path or path == ":memory:":
        return
    dir_path = Path(path).parent
    if str(dir_path) and str(dir_path) != ".":
        dir_path.mkdir(parents=True, exist_ok=True)


_connect_args = {
    "check_same_thread": False
} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(
    DATABASE_URL, connect_args=_connect_args, pool_pre_ping=True
)
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def init_db() -> None:
    _ensure_sqlite_dir(DATABASE_URL)
    import whitelist_admin.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def ping_db() -> None:
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
