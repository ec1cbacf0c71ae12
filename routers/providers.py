import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

import schemas
from dependencies import (
    get_claim_service,
    get_current_provider_manager,
    get_current_user,
    get_provider_repository,
)
from models import ClaimStatus
from repositories import ProviderRepository
from services.claim_service import ClaimService
from utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=schemas.ApiResponse)
def list_providers(
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    providers: ProviderRepository = Depends(get_provider_repository),
):
    """Liste les fournisseurs actifs."""
    try:
        active = providers.find_active()
    except Exception as e:
        logger.error(f"Échec de la lecture des fournisseurs. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve providers", str(e))
    return success_response("Providers retrieved successfully", data=active)


@router.get("/{provider_id}/claims", response_model=schemas.ApiResponse)
def list_provider_claims(
    provider_id: str,
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: schemas.AuthenticatedUser = Depends(get_current_provider_manager),
    claim_service: ClaimService = Depends(get_claim_service),
):
    """Réclamations d'un fournisseur, réservé à ses managers. Filtre optionnel ?status=."""
    if status_filter and status_filter not in [claim_status.value for claim_status in ClaimStatus]:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid status", "Status must be one of: " + ", ".join(s.value for s in ClaimStatus))

    try:
        claims = claim_service.list_for_provider(provider_id, status_filter)
    except Exception as e:
        logger.error(f"Échec de la lecture des réclamations du fournisseur {provider_id}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve provider claims", str(e))
    return success_response("Provider claims retrieved successfully", data=claims)
