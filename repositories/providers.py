from typing import List, Optional

from pymongo.database import Database

from models import Provider, ProviderStatus
from .base import DocumentCollection


class ProviderRepository:
    def __init__(self, db: Database):
        self.providers = DocumentCollection(db["providers"], Provider)

    def find_by_id(self, provider_id: str) -> Optional[Provider]:
        return self.providers.find_by_id(provider_id)

    def find_active(self) -> List[Provider]:
        return self.providers.find({"status": ProviderStatus.active.value})

    def create(self, provider: Provider) -> Provider:
        return self.providers.insert(provider)
