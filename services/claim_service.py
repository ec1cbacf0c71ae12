import logging
from datetime import datetime, timezone
from typing import List, Optional

import schemas
from exceptions import ClaimForbiddenError, ClaimNotFoundError
from models import Claim, ClaimStatus, Comment, UserRole
from repositories import ClaimRepository, LogRepository

logger = logging.getLogger(__name__)

# Statuts depuis lesquels un demandeur peut encore agir sur sa réclamation
CLAIMANT_EDITABLE_STATUSES = {ClaimStatus.pending.value, ClaimStatus.rejected.value}


def can_transition(role: str, current_status: str, new_status: str) -> bool:
    """
    Règle unique de transition de statut.

    Un demandeur ne peut agir que si la réclamation est pending ou rejected.
    Un manager peut passer de n'importe quel statut à n'importe quel autre ;
    aucun statut cible n'est restreint.
    """
    if role == UserRole.claimant.value:
        return current_status in CLAIMANT_EDITABLE_STATUSES
    return True


class ClaimService:
    """
    Opérations sur les réclamations, filtrées selon le rôle du demandeur.

    Chaque modification est suivie d'une entrée dans le journal, sans transaction
    entre les deux écritures.
    """

    def __init__(self, claims: ClaimRepository, logs: LogRepository):
        self.claims = claims
        self.logs = logs

    def list(self, requester: schemas.AuthenticatedUser) -> List[Claim]:
        if requester.role == UserRole.manager.value:
            return self.claims.find_by_provider(requester.provider_id)
        return self.claims.find_by_user(requester.id)

    def list_for_provider(self, provider_id: str, status: Optional[str] = None) -> List[Claim]:
        if status:
            return self.claims.find_by_provider_and_status(provider_id, ClaimStatus(status))
        return self.claims.find_by_provider(provider_id)

    def get(self, requester: schemas.AuthenticatedUser, claim_id: str) -> Claim:
        claim = self.claims.find_by_id(claim_id)
        if claim is None or claim.is_deleted:
            raise ClaimNotFoundError()
        if requester.role == UserRole.manager.value:
            visible = claim.provider_id is not None and claim.provider_id == requester.provider_id
        else:
            visible = claim.user_id == requester.id
        if not visible:
            raise ClaimNotFoundError()
        return claim

    def create(self, requester: schemas.AuthenticatedUser, fields: schemas.ClaimCreate) -> Claim:
        claim = Claim(
            **fields.model_dump(),
            user_id=requester.id,
            status=ClaimStatus.pending,
            created_at=datetime.now(timezone.utc),
            comments=[],
            is_deleted=False,
        )
        created = self.claims.create(claim)
        self.logs.log_action(requester.id, created.id, "Created new claim")
        logger.info(f"Réclamation {created.id} créée par {requester.email}")
        return created

    def update_status(self, requester: schemas.AuthenticatedUser, claim_id: str, new_status: str) -> Claim:
        claim = self.claims.find_by_id(claim_id)
        if claim is None:
            raise ClaimNotFoundError()

        new_status = ClaimStatus(new_status).value
        if not can_transition(requester.role, claim.status, new_status):
            raise ClaimForbiddenError()

        updated = self.claims.update_status(claim_id, new_status)
        if updated is None:
            raise ClaimNotFoundError()
        self.logs.log_action(requester.id, claim_id, f"Updated claim status from {claim.status} to {new_status}")
        logger.info(f"Réclamation {claim_id}: {claim.status} -> {new_status} par {requester.email}")
        return updated

    def add_comment(self, requester: schemas.AuthenticatedUser, claim_id: str, message: str) -> Claim:
        claim = self.claims.find_by_id(claim_id)
        if claim is None:
            raise ClaimNotFoundError()

        comment = Comment(name=requester.email, message=message, created_at=datetime.now(timezone.utc))
        updated = self.claims.add_comment(claim_id, comment)
        if updated is None:
            raise ClaimNotFoundError()
        self.logs.log_action(requester.id, claim_id, f"Added comment: {message}")
        return updated
