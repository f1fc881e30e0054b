import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import func
from sqlmodel import Session, select
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
import models
from database import create_db_and_tables, get_session
from dependencies.auth import COOKIE_NAME, get_current_identity
from services.permissions import Identidad
from services.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    verify_password,
)

# Routers
from routes.rol_routes import router as rol_router
from routes.user_routes import router as user_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("backend")


# -------------------------
# STARTUP
# -------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("Tablas listas, backend iniciado")
    yield


app = FastAPI(title="Roles y Usuarios", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------
# ERRORES
# -------------------------
# todas las respuestas de error con la forma {"message": "..."}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    detalles = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}"
        for e in exc.errors()
    )
    logger.warning("Request inválido en %s: %s", request.url.path, detalles)
    return JSONResponse(
        status_code=400,
        content={"message": f"Datos inválidos: {detalles}"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s", request.url.path)
    return JSONResponse(status_code=500, content={"message": "Error interno del servidor"})


# -------------------------
# ROOT
# -------------------------
@app.get("/")
def home():
    return {"mensaje": "Backend listo"}


# -------------------------
# ROUTERS
# -------------------------
app.include_router(rol_router)
app.include_router(user_router)

# =========================
# AUTH
# =========================

class LoginRequest(BaseModel):
    email: str
    password: str


@app.post("/login")
def login(
    data: LoginRequest,
    response: Response,
    session: Session = Depends(get_session)
):
    user = session.exec(
        select(models.User).where(func.lower(models.User.email) == data.email.strip().lower())
    ).first()

    if not user or not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Credenciales inválidas")
    if not user.activo:
        raise HTTPException(status_code=401, detail="Usuario inactivo")

    rol = session.get(models.Role, user.rol_id)
    roles = [rol.nombre] if rol and rol.activo else []

    token = create_access_token({
        "sub": str(user.id),           # jose exige string
        "email": user.email,
        "rol_id": user.rol_id,
        "nombre": user.nombre,
        "roles": roles,
    })

    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=True,      # True en prod (HTTPS)
        samesite="none",    # prod cross-site => "none" + secure=True
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/",
    )

    return {"ok": True, "access_token": token, "token_type": "bearer"}


@app.get("/me")
def me(identidad: Identidad = Depends(get_current_identity)):
    return {
        "id": identidad.user_id,
        "email": identidad.email,
        "roles": sorted(identidad.roles),
    }


@app.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, path="/")
    return {"ok": True}
