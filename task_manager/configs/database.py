from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from .settings import settings


def make_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = make_engine(settings.database_url, echo=settings.DEBUG)

def init_db(bind: Engine = engine):
    # Register tables on the metadata before creating them
    from task_manager import models  # noqa: F401

    SQLModel.metadata.create_all(bind)

def get_db():
    with Session(engine) as session:
        yield session
