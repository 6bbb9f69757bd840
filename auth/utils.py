# backend/auth/utils.py
import hashlib
import time

DEFAULT_HASH_SECRET = "MediaMunch"

# =====================================================
# 🔹 Hashing
# =====================================================
def hash_password(password: str, username: str, date_created: str,
                  secret: str = DEFAULT_HASH_SECRET) -> str:
    """
    Hash SHA-256 (hex) de password + username + date_created + secret.

    El orden de concatenación y el sufijo secreto forman parte del formato
    almacenado: cualquier cambio impide el login de las cuentas existentes.
    """
    raw = f"{password}{username}{date_created}{secret}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()

# =====================================================
# 🔹 Marcas de tiempo
# =====================================================
def now_millis() -> str:
    """Milisegundos epoch como string, formato almacenado de dateCreated/dateUpdated."""
    return str(int(time.time() * 1000))
