# path: services/db_errors.py
from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from exceptions import ExternalServiceException

logger = logging.getLogger(__name__)


@contextmanager
def operacion_db(session: Session, accion: str):
    """Envuelve los errores de SQLAlchemy como ExternalServiceException."""
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Falla de base de datos al %s: %s", accion, exc)
        raise ExternalServiceException(f"Error de base de datos al {accion}") from exc


# INTEGER de SQLite / BIGINT de Postgres
MAX_ID = 2**63 - 1


def id_en_rango(valor: int | None) -> bool:
    return valor is not None and 0 < valor <= MAX_ID
