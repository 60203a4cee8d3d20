"""
Domain errors raised by the authentication module.
Each error carries the client-facing message and the HTTP status the boundary should use.
"""

from fastapi import status


class AuthError(Exception):
    """Base class for authentication and session errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro interno do servidor."

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class DuplicateUserError(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Nome de usuário já cadastrado"


class InvalidCredentialsError(AuthError):
    # Same message for unknown user and wrong password
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Credenciais inválidas."


class TokenMissingError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token não fornecido"


class TokenInvalidError(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Token inválido"


class TokenExpiredError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token expirado"


class TokenRevokedError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token revogado"


class PersistenceError(AuthError):
    pass


class LogoutError(AuthError):
    default_message = "Erro ao realizar logout."


class HashingError(AuthError):
    default_message = "Erro ao processar senha."


class StoreUnavailableError(AuthError):
    default_message = "Armazenamento de revogação indisponível."
