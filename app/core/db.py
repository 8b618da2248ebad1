from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings

# Базовый класс для моделей
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


# Движок
engine = build_engine(settings.database_url, echo=settings.sql_echo)

# Сессии
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind=None) -> None:
    """Создание таблиц"""
    import app.db.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    with SessionLocal() as session:
        yield session
