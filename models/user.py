from datetime import datetime
from enum import Enum
from typing import Optional

from .base import MongoModel


class UserRole(str, Enum):
    manager = "manager"      # Gestionnaire rattaché à un fournisseur
    claimant = "claimant"    # Demandeur de prestations


class UserStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    blocked = "blocked"


class User(MongoModel):
    name: str
    email: str
    password: str  # hashed
    role: UserRole
    status: UserStatus = UserStatus.active
    last_login: Optional[datetime] = None
    is_deleted: bool = False
    provider_id: Optional[str] = None  # obligatoire pour un manager
