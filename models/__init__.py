from .base import CamelModel, MongoModel
from .user import User, UserRole, UserStatus
from .provider import Provider, ProviderStatus
from .claim import Claim, ClaimStatus, Comment
from .log import Log

__all__ = [
    "CamelModel",
    "MongoModel",
    "User",
    "UserRole",
    "UserStatus",
    "Provider",
    "ProviderStatus",
    "Claim",
    "ClaimStatus",
    "Comment",
    "Log",
]
