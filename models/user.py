# backend/models/user.py
import re
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator
from typing import List, Optional
from auth.utils import now_millis

EMAIL_PATTERN = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
)
# Se busca, no se exige coincidencia completa: basta un tramo de 3-20 caracteres de palabra.
USERNAME_PATTERN = re.compile(r"\w{3,20}", re.ASCII)

# Clave almacenada -> atributo del modelo, para la operación de actualización.
UPDATABLE_FIELDS = {
    "email": "email",
    "username": "username",
    "pass": "password",
    "dateCreated": "date_created",
    "dateUpdated": "date_updated",
}


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: Optional[str] = None
    email: Optional[str] = Field(default=None, validate_default=True)
    # Opcional en el tipo porque documentos antiguos pueden no tenerlo;
    # los registros nuevos lo exigen en check_username.
    username: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, alias="pass", validate_default=True)
    date_created: str = Field(default_factory=now_millis, alias="dateCreated")
    date_updated: str = Field(default_factory=now_millis, alias="dateUpdated")

    # Valor de `pass` tal como se leyó o escribió por última vez en la base.
    _loaded_password: Optional[str] = PrivateAttr(default=None)

    @field_validator("email")
    @classmethod
    def check_email(cls, value):
        if not value:
            raise ValueError("Email address not provided")
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError(f'"{value}" is not a valid email address')
        return value

    @field_validator("username")
    @classmethod
    def check_username(cls, value):
        if value is None:
            raise ValueError("Username not provided")
        if not USERNAME_PATTERN.search(value):
            raise ValueError(f'"{value}" is not a valid username')
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value):
        if not value:
            raise ValueError("Password not provided")
        return value

    # ------------------------------------------------------------
    # 🔹 Carga desde la base (sin revalidar)
    # ------------------------------------------------------------
    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """
        Construye un usuario a partir de un documento Mongo tal cual está
        guardado. No pasa por los validadores: los datos escritos por
        versiones anteriores se devuelven aunque no cumplan el esquema actual.
        """
        data = {"id": str(doc["_id"])}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in doc:
                data[name] = doc[key]
        user = cls.model_construct(**data)
        user.mark_persisted()
        return user

    # ------------------------------------------------------------
    # 🔹 Control de cambios
    # ------------------------------------------------------------
    def mark_persisted(self) -> None:
        self._loaded_password = self.password

    def is_password_modified(self) -> bool:
        return self.password != self._loaded_password

    # ------------------------------------------------------------
    # 🔹 Serialización
    # ------------------------------------------------------------
    def to_document(self) -> dict:
        """Cuerpo del documento Mongo con las claves almacenadas. `_id` lo asigna la base."""
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_public(self) -> dict:
        """Vista JSON para las respuestas. Nunca expone el hash de la contraseña."""
        return self.model_dump(by_alias=True, exclude={"password"})


def validation_messages(exc: ValidationError) -> List[str]:
    """Aplana un ValidationError de pydantic en los mensajes lanzados arriba."""
    messages = []
    for error in exc.errors():
        ctx_error = error.get("ctx", {}).get("error")
        messages.append(str(ctx_error) if ctx_error else error["msg"])
    return messages
