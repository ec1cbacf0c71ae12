import logging

from fastapi import APIRouter, Depends, status

import schemas
from dependencies import get_claim_service, get_current_claimant_user, get_current_user
from exceptions import ClaimForbiddenError, ClaimNotFoundError
from models import ClaimStatus
from services.claim_service import ClaimService
from utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=schemas.ApiResponse)
def list_claims(
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    claim_service: ClaimService = Depends(get_claim_service),
):
    """Les managers voient les réclamations de leur fournisseur, les demandeurs les leurs."""
    try:
        claims = claim_service.list(current_user)
    except Exception as e:
        logger.error(f"Échec de la lecture des réclamations pour {current_user.email}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve claims", str(e))
    return success_response("Claims retrieved successfully", data=claims)


@router.get("/{claim_id}", response_model=schemas.ApiResponse)
def get_claim(
    claim_id: str,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    claim_service: ClaimService = Depends(get_claim_service),
):
    try:
        claim = claim_service.get(current_user, claim_id)
    except ClaimNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, "Claim not found", str(e))
    except Exception as e:
        logger.error(f"Échec de la lecture de la réclamation {claim_id}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve claim", str(e))
    return success_response("Claim retrieved successfully", data=claim)


@router.post("", response_model=schemas.ApiResponse, status_code=201)
def create_claim(
    claim: schemas.ClaimCreate,
    current_user: schemas.AuthenticatedUser = Depends(get_current_claimant_user),
    claim_service: ClaimService = Depends(get_claim_service),
):
    """Crée une réclamation (réservé aux demandeurs)."""
    try:
        created = claim_service.create(current_user, claim)
    except Exception as e:
        logger.error(f"Échec de la création de réclamation pour {current_user.email}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to create claim", str(e))
    return success_response("Claim created successfully", data=created, status_code=status.HTTP_201_CREATED)


@router.patch("/{claim_id}/status", response_model=schemas.ApiResponse)
def update_claim_status(
    claim_id: str,
    update: schemas.ClaimStatusUpdate,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    claim_service: ClaimService = Depends(get_claim_service),
):
    """Change le statut d'une réclamation (voir services.claim_service.can_transition)."""
    if update.status not in [claim_status.value for claim_status in ClaimStatus]:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid status", "Status must be one of: " + ", ".join(s.value for s in ClaimStatus))

    try:
        claim = claim_service.update_status(current_user, claim_id, update.status)
    except ClaimNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, "Claim not found", str(e))
    except ClaimForbiddenError as e:
        return error_response(status.HTTP_403_FORBIDDEN, "Cannot update claim", str(e))
    except Exception as e:
        logger.error(f"Échec de la mise à jour du statut de {claim_id}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to update claim status", str(e))
    return success_response("Claim status updated successfully", data=claim)


@router.post("/{claim_id}/comments", response_model=schemas.ApiResponse)
def add_comment(
    claim_id: str,
    comment: schemas.CommentCreate,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    claim_service: ClaimService = Depends(get_claim_service),
):
    try:
        claim = claim_service.add_comment(current_user, claim_id, comment.message)
    except ClaimNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, "Claim not found", str(e))
    except Exception as e:
        logger.error(f"Échec de l'ajout de commentaire sur {claim_id}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to add comment", str(e))
    return success_response("Comment added successfully", data=claim)
