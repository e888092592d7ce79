from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
import logging
import os
from typing import Optional
from functools import lru_cache

# database configuration
SQLITE_DEV_DB = "sqlite:///./confessions.db"
SQLITE_TEST_DB = "sqlite:///./test.db"
SQLITE_PROD_DB = "sqlite:///./confessions.db"

Base = declarative_base()

logger = logging.getLogger("fastapi")

@lru_cache()
def get_engine():
    """Get the process-wide database engine"""
    env = os.getenv("APP_ENV", "development")
    if env == "test":
        DATABASE_URL = SQLITE_TEST_DB
    elif env == "production":
        DATABASE_URL = os.getenv("DATABASE_URL", SQLITE_PROD_DB)
    else:  # development
        DATABASE_URL = SQLITE_DEV_DB

    return create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False}
    )

def get_session_maker():
    """Get the session factory"""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())

def get_session():
    """Get a database session"""
    SessionLocal = get_session_maker()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def migrate_posts_image(db_engine) -> bool:
    """Add the posts.image column to stores created before it existed.

    Returns True when the column was added. Failures are logged and
    swallowed so that startup carries on.
    """
    try:
        columns = {column["name"] for column in inspect(db_engine).get_columns("posts")}
        if "image" in columns:
            return False
        with db_engine.begin() as conn:
            conn.execute(text("ALTER TABLE posts ADD COLUMN image TEXT"))
    except SQLAlchemyError:
        logger.exception("Migration of posts.image failed")
        return False
    logger.info("Added column posts.image")
    return True

def create_tables(db_engine: Optional[object] = None):
    """Create all tables, then run the lightweight migrations

    Failures are logged and do not stop startup.

    Args:
        db_engine: optional engine, the default engine is used when omitted
    """
    # register the models on Base.metadata
    from app.models import post, reaction, reply, report  # noqa: F401

    engine = db_engine or get_engine()
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Creating tables failed")
        return
    migrate_posts_image(engine)
