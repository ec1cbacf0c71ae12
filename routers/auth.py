import logging

from fastapi import APIRouter, Depends, status

import schemas
from dependencies import get_auth_service, get_current_user
from exceptions import ClaimsAPIError
from models import UserRole
from services.auth_service import AuthService
from utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", response_model=schemas.ApiResponse, status_code=201)
def register(user: schemas.RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Inscrit un nouvel utilisateur (manager ou claimant).
    """
    if not user.email or not user.password or not user.name or not user.role:
        return error_response(status.HTTP_400_BAD_REQUEST, "Missing required fields", "All fields are required")

    if user.role not in [role.value for role in UserRole]:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid role", "Role must be either manager or claimant")

    # Un manager doit indiquer son fournisseur
    if user.role == UserRole.manager.value and not user.provider_id:
        return error_response(status.HTTP_400_BAD_REQUEST, "Provider ID is required for managers", "providerId is required")

    try:
        auth_service.register(user)
    except ClaimsAPIError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to register user", str(e))
    except Exception as e:
        logger.error(f"Échec de l'inscription de {user.email}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to register user", str(e))

    return success_response("User registered successfully", status_code=status.HTTP_201_CREATED)


@router.post("/login", response_model=schemas.ApiResponse)
def login(credentials: schemas.LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Connecte l'utilisateur et retourne un token JWT valable 24 heures.
    """
    if not credentials.email or not credentials.password:
        return error_response(status.HTTP_400_BAD_REQUEST, "Missing credentials", "Email and password are required")

    try:
        result = auth_service.login(credentials.email, credentials.password)
    except ClaimsAPIError as e:
        return error_response(status.HTTP_401_UNAUTHORIZED, "Login failed", str(e))
    except Exception as e:
        logger.error(f"Échec de la connexion de {credentials.email}. Erreur: {e}")
        return error_response(status.HTTP_401_UNAUTHORIZED, "Login failed", str(e))

    return success_response("Login successful", data=result)


@router.get("/me", response_model=schemas.ApiResponse)
def read_users_me(current_user: schemas.AuthenticatedUser = Depends(get_current_user)):
    """
    Retourne les informations de l'utilisateur actuellement connecté.
    """
    return success_response("User retrieved successfully", data=current_user)
