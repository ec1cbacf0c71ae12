# config.py
"""
Fichier de configuration centralisée pour l'API de gestion des réclamations.
Chaque valeur peut être surchargée par une variable d'environnement (ou le fichier .env
chargé par main.py).
"""
import os

# Base de données MongoDB
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
DATABASE_NAME = os.getenv("DATABASE_NAME", "claim-confidence")

# Configuration de la sécurité JWT (JSON Web Token)
SECRET_KEY = os.getenv("SECRET_KEY", "change_me_claims_api_secret_key")  # IMPORTANT: à remplacer en production
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

# Coût fixe du hachage bcrypt
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# Serveur HTTP
API_PREFIX = os.getenv("API_PREFIX", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
