from fastapi import Request
from sqlalchemy import Engine, create_engine

from personnel_api.core.config import Settings
from personnel_api.db.repository import Repository


def create_db_engine(settings: Settings) -> Engine:
    return create_engine(
        settings.DATABASE_URL,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )


def get_repository(request: Request) -> Repository:
    # built once in the app lifespan, shared by every request
    return request.app.state.repository
