"""Hachage des mots de passe et jetons JWT."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from passlib.context import CryptContext

from config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS, BCRYPT_ROUNDS

# --- CONFIGURATION SÉCURITÉ ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)
ACCESS_TOKEN_EXPIRE = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Hash illisible : traité comme un mot de passe erroné
        return False


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire_time = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else ACCESS_TOKEN_EXPIRE)
    to_encode.update({"exp": expire_time})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Vérifie la signature et l'expiration. Lève jose.JWTError en cas d'échec."""
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
