import os
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

# Stands in for the browser's localStorage, one row per (client, key).
CLIENT_STORAGE_URL = os.getenv("CLIENT_STORAGE_URL", "sqlite:///./lab_client_storage.db")

connect_args: dict[str, object] = {}
if CLIENT_STORAGE_URL.startswith("sqlite"):
    # Storage is read in threadpool dependencies and written from threadpool hops.
    connect_args["check_same_thread"] = False

engine = create_engine(CLIENT_STORAGE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


class Base(DeclarativeBase):
    pass


def create_tables() -> None:
    # Imported for its side effect of registering the storage table on Base.
    from labinventory import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    with SessionLocal() as db:
        yield db
