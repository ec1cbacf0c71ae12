from typing import Callable, Optional

from fastapi import Depends, Request, status
from pymongo.database import Database

import schemas
from database import get_mongo_db
from exceptions import AuthError, InvalidTokenError
from models import UserRole
from repositories import ClaimRepository, LogRepository, ProviderRepository, UserRepository
from services.auth_service import AuthService
from services.claim_service import ClaimService

# --- SERVICES ---

def get_auth_service(db: Database = Depends(get_mongo_db)) -> AuthService:
    return AuthService(UserRepository(db), ProviderRepository(db))

def get_claim_service(db: Database = Depends(get_mongo_db)) -> ClaimService:
    return ClaimService(ClaimRepository(db), LogRepository(db))

def get_log_repository(db: Database = Depends(get_mongo_db)) -> LogRepository:
    return LogRepository(db)

def get_provider_repository(db: Database = Depends(get_mongo_db)) -> ProviderRepository:
    return ProviderRepository(db)

# --- AUTHENTIFICATION ---

def get_current_user(request: Request, auth_service: AuthService = Depends(get_auth_service)) -> schemas.AuthenticatedUser:
    """
    Lit l'en-tête `Authorization: Bearer <token>`, valide le token et attache
    l'utilisateur à la requête (request.state.user).
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise AuthError(status.HTTP_401_UNAUTHORIZED, "No token provided", "Authentication required")

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise AuthError(status.HTTP_401_UNAUTHORIZED, "Invalid token format", "Token must be Bearer token")

    try:
        current_user = auth_service.validate_token(parts[1])
    except InvalidTokenError as e:
        raise AuthError(status.HTTP_401_UNAUTHORIZED, "Authentication failed", str(e))

    request.state.user = current_user
    return current_user

# --- AUTORISATIONS ---
# Prédicats purs, évalués après get_current_user.

def authorize_manager(user: Optional[schemas.AuthenticatedUser]) -> schemas.AuthenticatedUser:
    if user is None or user.role != UserRole.manager.value:
        raise AuthError(status.HTTP_403_FORBIDDEN, "Access denied", "Manager role required")
    return user

def authorize_provider(provider_id: str) -> Callable[[Optional[schemas.AuthenticatedUser]], schemas.AuthenticatedUser]:
    """Fabrique un prédicat lié à un fournisseur : seul un manager de ce fournisseur passe."""
    def check(user: Optional[schemas.AuthenticatedUser]) -> schemas.AuthenticatedUser:
        # Rôle incorrect et mauvais fournisseur sont volontairement indiscernables
        if user is None or user.role != UserRole.manager.value or user.provider_id != provider_id:
            raise AuthError(status.HTTP_403_FORBIDDEN, "Access denied", "Invalid provider access")
        return user
    return check

def authorize_claimant(user: Optional[schemas.AuthenticatedUser]) -> schemas.AuthenticatedUser:
    if user is None or user.role != UserRole.claimant.value:
        raise AuthError(status.HTTP_403_FORBIDDEN, "Access denied", "Claimant role required")
    return user

# --- DÉPENDANCES FASTAPI ---

def get_current_manager_user(current_user: schemas.AuthenticatedUser = Depends(get_current_user)) -> schemas.AuthenticatedUser:
    """Vérifie que l'utilisateur actuel est un manager."""
    return authorize_manager(current_user)

def get_current_claimant_user(current_user: schemas.AuthenticatedUser = Depends(get_current_user)) -> schemas.AuthenticatedUser:
    """Vérifie que l'utilisateur actuel est un demandeur."""
    return authorize_claimant(current_user)

def get_current_provider_manager(
    provider_id: str,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
) -> schemas.AuthenticatedUser:
    """Vérifie que l'utilisateur actuel gère le fournisseur désigné par le segment {provider_id} de la route."""
    return authorize_provider(provider_id)(current_user)
