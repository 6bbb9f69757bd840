# backend/auth/controllers.py
from pydantic import ValidationError
from typing import List
import logging

from models.user import UPDATABLE_FIELDS, User, validation_messages
from repositories.user_repository import UserRepository
from .exceptions import (
    AccountError, DuplicateKeyError, PasswordMismatchError, StoreError,
    UpdateError, UserNotFoundError, UserValidationError
)

logger = logging.getLogger("auth.controllers")

# =====================================================
# 🔹 Crear usuario
# =====================================================
def add_user(repo: UserRepository, email: str, username: str, password: str) -> User:
    """Crea un usuario con email, username y contraseña en claro. El resto toma sus valores por defecto."""
    try:
        user = User(email=email, username=username, password=password)
    except ValidationError as e:
        logger.warning(f"⚠️ Usuario {username!r} rechazado: {'; '.join(validation_messages(e))}")
        raise UserValidationError(":: error adding user to db") from e

    try:
        return repo.insert_one(user)
    except DuplicateKeyError as e:
        logger.warning(f"⚠️ Usuario {username!r} rechazado: {e.message}")
        raise DuplicateKeyError(":: error adding user to db") from e
    except StoreError as e:
        raise StoreError(":: error adding user to db") from e

# =====================================================
# 🔹 Actualizar un campo
# =====================================================
def update_user(repo: UserRepository, username: str, prop: str, new_value: str) -> User:
    """
    Sobrescribe un campo del usuario cuyo username coincide exactamente.

    `prop` es la clave almacenada (email, username, pass, dateCreated o
    dateUpdated). Un `pass` nuevo lo hashea el repositorio al guardar.
    Búsqueda y guardado son llamadas separadas: una escritura concurrente
    entre ambas se pierde sin aviso.
    """
    if prop not in UPDATABLE_FIELDS:
        raise UserValidationError(f":: property {prop!r} cannot be updated")

    try:
        matches = repo.find({"username": username})
    except StoreError as e:
        raise StoreError(":: error querying db") from e
    if len(matches) != 1:
        logger.warning(f"⚠️ Actualización omitida, {len(matches)} usuarios coinciden con {username!r}")
        raise UserNotFoundError(":: username not found")

    user = matches[0]
    try:
        setattr(user, UPDATABLE_FIELDS[prop], new_value)
        return repo.save(user)
    except ValidationError as e:
        logger.warning(f"⚠️ Actualización de {prop} para {username!r} rechazada: {'; '.join(validation_messages(e))}")
        raise UpdateError() from e
    except AccountError as e:
        logger.warning(f"⚠️ Actualización de {prop} para {username!r} fallida: {e.message}")
        raise UpdateError() from e

# =====================================================
# 🔹 Autenticar
# =====================================================
def authenticate(repo: UserRepository, prop: str, value: str, password: str) -> User:
    """Devuelve el único usuario con {prop: value} si `password` produce su hash almacenado."""
    try:
        matches = repo.find({prop: value})
    except StoreError as e:
        raise StoreError(":: error when querying db") from e
    if len(matches) != 1:
        raise UserNotFoundError(":: user not found")

    user = matches[0]
    if user.password != repo.hash_for(user, password):
        logger.warning(f"⚠️ Contraseña incorrecta para {prop}={value!r}")
        raise PasswordMismatchError()
    return user

# =====================================================
# 🔹 Listar usuarios
# =====================================================
def get_all_users(repo: UserRepository) -> List[User]:
    # El repositorio ya registra la traza del fallo.
    try:
        return repo.find_all()
    except StoreError as e:
        raise StoreError(":: error querying db") from e

# =====================================================
# 🔹 Usuario individual
# =====================================================
def get_user(repo: UserRepository, username: str) -> User:
    matches = repo.find({"username": username})
    if not matches:
        raise UserNotFoundError()
    return matches[0]
