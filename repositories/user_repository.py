# backend/repositories/user_repository.py
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError
from typing import List
import logging

from auth.exceptions import DuplicateKeyError, StoreError
from auth.utils import DEFAULT_HASH_SECRET, hash_password, now_millis
from models.user import User

logger = logging.getLogger("repositories.users")


class UserRepository:
    """
    Acceso a la colección de usuarios. Se crea una vez al arrancar y se
    entrega al servicio de cuentas; toda escritura pasa por `insert_one` o
    `save`, así la contraseña llega hasheada a la base.
    """

    def __init__(self, collection: Collection, hash_secret: str = DEFAULT_HASH_SECRET):
        self.collection = collection
        self.hash_secret = hash_secret

    # ------------------------------------------------------------
    # 🔹 Índices
    # ------------------------------------------------------------
    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index([("email", ASCENDING)], unique=True)
            self.collection.create_index([("username", ASCENDING)], unique=True)
        except PyMongoError as e:
            logger.exception("❌ Error al crear los índices de usuarios.")
            raise StoreError(":: error creating indexes") from e
        logger.info("✅ Índices únicos de email y username listos.")

    # ------------------------------------------------------------
    # 🔹 Hashing
    # ------------------------------------------------------------
    def hash_for(self, user: User, password: str) -> str:
        return hash_password(password, user.username, user.date_created, self.hash_secret)

    def _prepare(self, user: User) -> None:
        user.date_updated = now_millis()
        if user.is_password_modified():
            user.password = self.hash_for(user, user.password)

    # ------------------------------------------------------------
    # 🔹 Insertar
    # ------------------------------------------------------------
    def insert_one(self, user: User) -> User:
        self._prepare(user)
        try:
            result = self.collection.insert_one(user.to_document())
        except MongoDuplicateKeyError as e:
            logger.warning(f"⚠️ Usuario duplicado rechazado: {e.details}")
            raise DuplicateKeyError(":: duplicate email or username") from e
        except PyMongoError as e:
            logger.exception("❌ Error al insertar usuario.")
            raise StoreError(":: error inserting user") from e

        user.id = str(result.inserted_id)
        user.mark_persisted()
        logger.info(f"✅ Usuario creado con ID {user.id}")
        return user

    # ------------------------------------------------------------
    # 🔹 Guardar (actualizar un registro existente)
    # ------------------------------------------------------------
    def save(self, user: User) -> User:
        self._prepare(user)
        try:
            self.collection.replace_one({"_id": ObjectId(user.id)}, user.to_document())
        except MongoDuplicateKeyError as e:
            logger.warning(f"⚠️ Valor duplicado rechazado para usuario {user.id}: {e.details}")
            raise DuplicateKeyError(":: duplicate email or username") from e
        except PyMongoError as e:
            logger.exception(f"❌ Error al guardar usuario {user.id}.")
            raise StoreError(":: error saving user") from e

        user.mark_persisted()
        logger.info(f"✅ Usuario {user.id} guardado")
        return user

    # ------------------------------------------------------------
    # 🔹 Consultas
    # ------------------------------------------------------------
    def find(self, query: dict) -> List[User]:
        try:
            docs = list(self.collection.find(query))
        except PyMongoError as e:
            logger.exception(f"❌ Error al consultar usuarios con {list(query)}.")
            raise StoreError() from e
        return [User.from_document(doc) for doc in docs]

    def find_all(self) -> List[User]:
        return self.find({})
