from typing import Any, Optional
from datetime import datetime

from models import CamelModel, UserRole

# --- Schémas pour l'Authentification ---

# Les champs sont optionnels : les contrôles (champs manquants, rôle invalide)
# sont faits par le routeur pour renvoyer l'enveloppe 400 attendue.
class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None  # conservé tel quel : unicité sensible à la casse
    password: Optional[str] = None
    role: Optional[str] = None
    provider_id: Optional[str] = None

class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None

# Vue de l'utilisateur renvoyée au client (jamais de hash de mot de passe)
class UserView(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole
    provider_id: Optional[str] = None

class LoginResponse(CamelModel):
    token: str
    user: UserView

# Contenu d'un token validé, attaché à la requête
class AuthenticatedUser(CamelModel):
    id: str
    email: str
    role: UserRole
    provider_id: Optional[str] = None

# --- Schémas pour les Réclamations ---

class ClaimCreate(CamelModel):
    benefit: str
    full_name: Optional[str] = None
    birth_date: Optional[datetime] = None
    gender: Optional[str] = None
    phone_number: Optional[str] = None
    work_phone_number: Optional[str] = None
    dependants: bool = False
    role_start_date: Optional[datetime] = None
    provider_id: Optional[str] = None

class ClaimStatusUpdate(CamelModel):
    status: Optional[str] = None

class CommentCreate(CamelModel):
    message: str

# --- Enveloppe de réponse ---

class ApiResponse(CamelModel):
    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None
