from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, MongoModel


class ClaimStatus(str, Enum):
    pending = "pending"
    submitted = "submitted"
    review = "review"
    approved = "approved"
    rejected = "rejected"


class Comment(CamelModel):
    name: str  # email de l'auteur
    message: str
    created_at: datetime


class Claim(MongoModel):
    user_id: str
    benefit: str
    full_name: Optional[str] = None
    birth_date: Optional[datetime] = None
    gender: Optional[str] = None
    phone_number: Optional[str] = None
    work_phone_number: Optional[str] = None
    dependants: bool = False
    role_start_date: Optional[datetime] = None
    provider_id: Optional[str] = None
    status: ClaimStatus = ClaimStatus.pending
    created_at: datetime
    comments: List[Comment] = Field(default_factory=list)
    is_deleted: bool = False
