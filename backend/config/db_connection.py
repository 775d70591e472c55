"""
Database connection configuration using SQLModel and PostgreSQL
"""
import os
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

# Get database configuration from environment variables
ADMIN_USER = os.getenv("ADMIN_USER", "postgres")
PASSWORD = os.getenv("PASSWORD", "password")
HOST = os.getenv("HOST", "localhost")
DB_NAME = os.getenv("DB_NAME", "nyumba_db")
DB_PORT = os.getenv("DB_PORT", "5432")

# DATABASE_URL wins over the individual settings
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg://{ADMIN_USER}:{PASSWORD}@{HOST}:{DB_PORT}/{DB_NAME}",
)

_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Create the SQLModel engine on first use"""
    global _engine
    if _engine is None:
        options = {"echo": os.getenv("DEBUG", "false").lower() == "true"}
        if DATABASE_URL.startswith("postgresql"):
            options.update(pool_size=5, max_overflow=10)
        _engine = create_engine(DATABASE_URL, **options)
    return _engine


def init_db(engine: Optional[Engine] = None):
    """Initialize database tables"""
    import models  # noqa: F401  registers the tables on SQLModel.metadata

    SQLModel.metadata.create_all(engine or get_engine())


def get_database_url() -> str:
    """Get the database URL for external use"""
    return DATABASE_URL
