# infra/db/base.py
from __future__ import annotations
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine
import logging

from infra.path import database_url

logger = logging.getLogger(__name__)

Base = declarative_base()

db_url = database_url()
logger.info("Using database at: %s", db_url)

engine = create_engine(
    db_url,
    echo=False,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
