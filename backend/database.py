# backend/database.py
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    # Hosted Postgres often hands out postgres://, SQLAlchemy requires postgresql://
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(database_url: str) -> Engine:
    url = normalize_database_url(database_url)

    if "sqlite" in url:
        connect_args = {"check_same_thread": False} # SQLite only
    else:
        connect_args = {}

    return create_engine(url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    db = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine):
    # Register every model on Base.metadata before creating tables
    import models.users  # noqa: F401
    import models.service_request  # noqa: F401
    import models.log  # noqa: F401

    Base.metadata.create_all(bind=engine)
