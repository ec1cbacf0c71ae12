from .base import DocumentCollection, to_object_id
from .users import UserRepository
from .providers import ProviderRepository
from .claims import ClaimRepository
from .logs import LogRepository

__all__ = [
    "DocumentCollection",
    "to_object_id",
    "UserRepository",
    "ProviderRepository",
    "ClaimRepository",
    "LogRepository",
]
