# path: controllers/respuestas.py
from __future__ import annotations

import logging

from fastapi.responses import JSONResponse

from exceptions import LOG_LEVEL_BY_KIND, STATUS_BY_KIND, classify


def mensaje(texto: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": texto})


def bad_request(texto: str) -> JSONResponse:
    return mensaje(texto, status_code=400)


def respuesta_error(exc: Exception, mensaje_log: str, logger: logging.Logger) -> JSONResponse:
    """
    Loguea con el nivel que corresponde al tipo de error y arma
    {"message": ...} con el status de classify().
    """
    kind = classify(exc)
    level = LOG_LEVEL_BY_KIND[kind]
    logger.log(level, "%s: %s", mensaje_log, exc, exc_info=level >= logging.ERROR)
    return mensaje(str(exc), status_code=STATUS_BY_KIND[kind])
