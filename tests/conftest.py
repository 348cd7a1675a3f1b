import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from autoslug.db.types import SlugType
from autoslug.models.changeset import Changeset

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    slug = Column(SlugType(255), unique=True, nullable=True, index=True)
    kind = Column(String(20), nullable=False)

    __mapper_args__ = {"polymorphic_on": kind, "polymorphic_identity": "article"}


class Review(Article):
    __mapper_args__ = {"polymorphic_identity": "review"}


@pytest.fixture
def changeset_factory():
    """Builds in-memory changesets from stored and pending values."""

    def make(current=None, **pending):
        return Changeset(current=current or {}, pending=pending)

    return make


@pytest.fixture
def db():
    """Provides a session bound to a fresh in-memory SQLite database."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
