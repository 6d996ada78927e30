from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from contextlib import contextmanager

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User, UserToken  # noqa: F401

def _create_engine():
    if DATABASE_URL.startswith("sqlite"):
        if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
            # In-memory databases only live as long as their one connection
            return create_engine(
                DATABASE_URL,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(
            DATABASE_URL,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Postgres and friends: no pooling for serverless, pre-ping stale connections
    return create_engine(
        DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        poolclass=NullPool,
    )

engine = _create_engine()

# Objects stay readable after commit so deleted rows can still be returned
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def get_session():
    """Get a database session (context manager style).

    This is a convenience function for use outside of FastAPI dependencies.
    Usage:
        with get_session() as session:
            # do something with session
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def create_tables():
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=engine)

def drop_tables():
    """Drop all database tables."""
    SQLModel.metadata.drop_all(bind=engine)
