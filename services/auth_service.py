import logging
from datetime import datetime, timezone

from jose import JWTError

import schemas
from exceptions import (
    DuplicateUserError,
    InactiveUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    ProviderNotFoundError,
)
from models import User, UserRole, UserStatus
from repositories import ProviderRepository, UserRepository
from security import create_access_token, decode_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Inscription, connexion et validation des tokens."""

    def __init__(self, users: UserRepository, providers: ProviderRepository):
        self.users = users
        self.providers = providers

    def register(self, data: schemas.RegisterRequest) -> User:
        """
        Crée un utilisateur actif.

        Le contrôle d'unicité de l'email puis l'insertion ne sont pas atomiques :
        deux inscriptions simultanées peuvent passer le contrôle.
        """
        if self.users.exists(data.email):
            raise DuplicateUserError()

        # Un manager doit être rattaché à un fournisseur existant
        if data.role == UserRole.manager.value and data.provider_id:
            if self.providers.find_by_id(data.provider_id) is None:
                raise ProviderNotFoundError()

        user = User(
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
            role=data.role,
            status=UserStatus.active,
            last_login=datetime.now(timezone.utc),
            is_deleted=False,
            provider_id=data.provider_id,
        )
        created = self.users.create(user)
        logger.info(f"Nouvel utilisateur inscrit: {created.email} ({created.role})")
        return created

    def login(self, email: str, password: str) -> schemas.LoginResponse:
        user = self.users.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError()

        # Le statut est vérifié avant le mot de passe
        if user.status != UserStatus.active.value:
            raise InactiveUserError()

        if not verify_password(password, user.password):
            raise InvalidCredentialsError()

        self.users.update_last_login(user.id)
        token = create_access_token(
            data={"id": user.id, "email": user.email, "role": user.role, "providerId": user.provider_id}
        )
        logger.info(f"Connexion réussie pour {user.email}")
        return schemas.LoginResponse(
            token=token,
            user=schemas.UserView(
                id=user.id,
                name=user.name,
                email=user.email,
                role=user.role,
                provider_id=user.provider_id,
            ),
        )

    def validate_token(self, token: str) -> schemas.AuthenticatedUser:
        """Toutes les causes d'échec produisent la même InvalidTokenError."""
        try:
            payload = decode_access_token(token)
            authenticated = schemas.AuthenticatedUser.model_validate(payload)
        except (JWTError, ValueError):
            raise InvalidTokenError()

        user = self.users.find_by_id(authenticated.id)
        if user is None or user.status != UserStatus.active.value:
            raise InvalidTokenError()
        return authenticated
