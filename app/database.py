from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings
import logging

# Set up logging
logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live inside a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,   # Auto-reconnect on broken connections
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,    # Recycle connections after 30 minutes
    }


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

if settings.DATABASE_URL.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite leaves foreign key enforcement off per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create any missing tables."""
    # Models must be imported so they register on Base.metadata
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("✅ Database schema ready")
