# backend/auth/routes.py
from fastapi import APIRouter, Depends, Query, Request
from repositories.user_repository import UserRepository
from .controllers import add_user, authenticate, get_all_users, get_user
import logging

router = APIRouter()
LOG = logging.getLogger("auth.routes")


def get_repository(request: Request) -> UserRepository:
    """Repositorio creado al arrancar y guardado en el estado de la aplicación."""
    return request.app.state.users

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.get("/auth", summary="Autenticar usuario por username")
def login(
    username: str = Query(...),
    password: str = Query(..., alias="pass"),
    repo: UserRepository = Depends(get_repository),
):
    LOG.info(f"🔐 Autenticando {username!r}")
    return authenticate(repo, "username", username, password).to_public()

# ------------------------------------------------------------
# 🔹 Crear
# ------------------------------------------------------------
@router.get("/create", summary="Crear usuario")
def create(
    username: str = Query(...),
    email: str = Query(...),
    password: str = Query(..., alias="pass"),
    repo: UserRepository = Depends(get_repository),
):
    LOG.info(f"🧩 Creando usuario {username!r}")
    return add_user(repo, email, username, password).to_public()

# ------------------------------------------------------------
# 🔹 Listar usuarios
# ------------------------------------------------------------
@router.get("/users", summary="Listar todos los usuarios")
def users(repo: UserRepository = Depends(get_repository)):
    return [user.to_public() for user in get_all_users(repo)]

# ------------------------------------------------------------
# 🔹 Usuario individual
# ------------------------------------------------------------
@router.get("/user/{username}", summary="Obtener usuario por username")
def user(username: str, repo: UserRepository = Depends(get_repository)):
    return get_user(repo, username).to_public()
