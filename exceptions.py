"""Exceptions métier de l'API de gestion des réclamations."""

from typing import Optional


class ClaimsAPIError(Exception):
    """Exception de base de l'API"""
    pass


class DuplicateUserError(ClaimsAPIError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class ProviderNotFoundError(ClaimsAPIError):
    def __init__(self, message: str = "Provider not found"):
        super().__init__(message)


class InvalidCredentialsError(ClaimsAPIError):
    """Email inconnu ou mot de passe erroné : le message est identique dans les deux cas."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InactiveUserError(ClaimsAPIError):
    def __init__(self, message: str = "User is not active"):
        super().__init__(message)


class InvalidTokenError(ClaimsAPIError):
    """Token malformé, expiré, utilisateur inconnu ou inactif : une seule erreur pour tous les cas."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ClaimNotFoundError(ClaimsAPIError):
    def __init__(self, message: str = "Invalid claim ID"):
        super().__init__(message)


class ClaimForbiddenError(ClaimsAPIError):
    def __init__(self, message: str = "Claim cannot be modified in current status"):
        super().__init__(message)


class AuthError(ClaimsAPIError):
    """Refus d'authentification ou d'autorisation, rendu sous forme d'enveloppe JSON."""

    def __init__(self, status_code: int, message: str, error: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.error = error
        super().__init__(error or message)
