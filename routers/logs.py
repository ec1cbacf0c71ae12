import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

import schemas
from dependencies import get_current_user, get_log_repository
from repositories import LogRepository
from utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=schemas.ApiResponse)
def get_logs(
    claim_id: Optional[str] = Query(None, alias="claimId"),
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    logs: LogRepository = Depends(get_log_repository),
):
    """Journal de l'utilisateur connecté, ou d'une réclamation si ?claimId= est fourni."""
    try:
        if claim_id:
            entries = logs.find_by_claim(claim_id)
        else:
            entries = logs.find_by_user(current_user.id)
    except Exception as e:
        logger.error(f"Échec de la lecture du journal. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve logs", str(e))
    return success_response("Logs retrieved successfully", data=entries)


@router.get("/claim/{claim_id}", response_model=schemas.ApiResponse)
def get_claim_logs(
    claim_id: str,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    logs: LogRepository = Depends(get_log_repository),
):
    try:
        entries = logs.find_by_claim(claim_id)
    except Exception as e:
        logger.error(f"Échec de la lecture du journal de {claim_id}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve claim logs", str(e))
    return success_response("Claim logs retrieved successfully", data=entries)


@router.get("/claim/{claim_id}/user", response_model=schemas.ApiResponse)
def get_user_claim_logs(
    claim_id: str,
    current_user: schemas.AuthenticatedUser = Depends(get_current_user),
    logs: LogRepository = Depends(get_log_repository),
):
    """Actions de l'utilisateur connecté sur une réclamation."""
    try:
        entries = logs.find_by_user_and_claim(current_user.id, claim_id)
    except Exception as e:
        logger.error(f"Échec de la lecture du journal de {claim_id} pour {current_user.email}. Erreur: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Failed to retrieve user claim logs", str(e))
    return success_response("User claim logs retrieved successfully", data=entries)
