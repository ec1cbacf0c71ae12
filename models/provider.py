from enum import Enum

from .base import MongoModel


class ProviderStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class Provider(MongoModel):
    name: str
    email: str
    address: str = ""
    status: ProviderStatus = ProviderStatus.active
