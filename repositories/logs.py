from datetime import datetime, timezone
from typing import List

from pymongo.database import Database

from models import Log
from .base import DocumentCollection


class LogRepository:
    """Journal d'audit en ajout seul."""

    def __init__(self, db: Database):
        self.logs = DocumentCollection(db["logs"], Log)

    def find_by_user(self, user_id: str) -> List[Log]:
        return self.logs.find({"userId": user_id})

    def find_by_claim(self, claim_id: str) -> List[Log]:
        return self.logs.find({"claimId": claim_id})

    def find_by_user_and_claim(self, user_id: str, claim_id: str) -> List[Log]:
        return self.logs.find({"userId": user_id, "claimId": claim_id})

    def log_action(self, user_id: str, claim_id: str, action: str) -> Log:
        entry = Log(user_id=user_id, claim_id=claim_id, action=action, date=datetime.now(timezone.utc))
        return self.logs.insert(entry)
