from typing import List, Optional

from pymongo.database import Database

from models import Claim, ClaimStatus, Comment
from .base import DocumentCollection


class ClaimRepository:
    """Réclamations. Les recherches par liste ignorent les documents marqués isDeleted."""

    def __init__(self, db: Database):
        self.claims = DocumentCollection(db["claims"], Claim)

    def find_by_id(self, claim_id: str) -> Optional[Claim]:
        return self.claims.find_by_id(claim_id)

    def find_by_user(self, user_id: str) -> List[Claim]:
        return self.claims.find({"userId": user_id, "isDeleted": False})

    def find_by_provider(self, provider_id: str) -> List[Claim]:
        return self.claims.find({"providerId": provider_id, "isDeleted": False})

    def find_by_provider_and_status(self, provider_id: str, status: ClaimStatus) -> List[Claim]:
        return self.claims.find({"providerId": provider_id, "status": ClaimStatus(status).value, "isDeleted": False})

    def create(self, claim: Claim) -> Claim:
        return self.claims.insert(claim)

    def update_status(self, claim_id: str, status: ClaimStatus) -> Optional[Claim]:
        return self.claims.set_fields(claim_id, {"status": ClaimStatus(status).value})

    def add_comment(self, claim_id: str, comment: Comment) -> Optional[Claim]:
        return self.claims.update(claim_id, {"$push": {"comments": comment.model_dump(by_alias=True)}})
