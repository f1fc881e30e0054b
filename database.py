from sqlmodel import SQLModel, create_engine, Session

import config

DATABASE_URL = config.DATABASE_URL
if not DATABASE_URL:
    raise RuntimeError("Falta DATABASE_URL en el .env")

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=config.SQL_ECHO, connect_args=connect_args)


def create_db_and_tables():
    # registra los modelos en el metadata antes de crear
    import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
