from datetime import datetime

from .base import MongoModel


# Entrée du journal d'audit : jamais modifiée ni supprimée
class Log(MongoModel):
    user_id: str
    claim_id: str
    action: str
    date: datetime
