# backend/auth/exceptions.py


class AccountError(Exception):
    """Excepción base de todos los fallos del servicio de cuentas."""

    kind = "AccountError"
    status_code = 500

    def __init__(self, message: str = ":: account error"):
        self.message = message
        super().__init__(self.message)


class UserValidationError(AccountError):
    """Email o username con formato inválido."""

    kind = "ValidationError"
    status_code = 400


class DuplicateKeyError(AccountError):
    """Email o username ya registrado."""

    kind = "DuplicateKey"
    status_code = 409


class UserNotFoundError(AccountError):
    """La búsqueda no encontró usuarios o encontró más de uno."""

    kind = "NotFound"
    status_code = 404

    def __init__(self, message: str = ":: user not found"):
        super().__init__(message)


class PasswordMismatchError(AccountError):
    kind = "PasswordMismatch"
    status_code = 401

    def __init__(self, message: str = ":: pass does not match"):
        super().__init__(message)


class UpdateError(AccountError):
    kind = "UpdateError"
    status_code = 500

    def __init__(self, message: str = ":: error when updating db"):
        super().__init__(message)


class StoreError(AccountError):
    """Falló la llamada a la base de datos."""

    kind = "StoreError"
    status_code = 503

    def __init__(self, message: str = ":: error querying db"):
        super().__init__(message)
