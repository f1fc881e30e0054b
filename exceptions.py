# path: exceptions.py
"""
Errores de la capa de servicios y su traducción a HTTP.

Cada error conocido cae en exactamente una categoría (ErrorKind). Los
controllers no deciden el status a mano: llaman a classify() y usan las
tablas de abajo para el status y el nivel de log.
"""
from __future__ import annotations

import logging
from enum import Enum


class AppException(Exception):
    """Base de los errores propios de la app."""

    def __init__(self, message: str = "Ocurrió un error"):
        self.message = message
        super().__init__(self.message)


class ValidationException(AppException):
    """Datos que no cumplen las reglas del negocio (más allá del formato)."""


class EntityNotFoundException(AppException):
    """La entidad pedida no existe o no aplica para la operación."""

    def __init__(self, entity: str, entity_id: int | None = None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity} no encontrado"
        else:
            message = f"{entity} con ID {entity_id} no encontrado"
        super().__init__(message)


class ExternalServiceException(AppException):
    """Falla de la base de datos u otra dependencia externa."""


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL_ERROR: 500,
}

LOG_LEVEL_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: logging.WARNING,
    ErrorKind.NOT_FOUND: logging.INFO,
    ErrorKind.INTERNAL_ERROR: logging.ERROR,
}


def classify(error: BaseException) -> ErrorKind:
    if isinstance(error, ValidationException):
        return ErrorKind.BAD_REQUEST
    if isinstance(error, EntityNotFoundException):
        return ErrorKind.NOT_FOUND
    # ExternalServiceException y cualquier otra cosa
    return ErrorKind.INTERNAL_ERROR
