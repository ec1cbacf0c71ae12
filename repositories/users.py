from datetime import datetime, timezone
from typing import Optional

from pymongo.database import Database

from models import User
from .base import DocumentCollection


class UserRepository:
    def __init__(self, db: Database):
        self.users = DocumentCollection(db["users"], User)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.find_by_id(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.users.find_one({"email": email})

    def exists(self, email: str) -> bool:
        # Seuls les utilisateurs non supprimés comptent pour l'unicité de l'email
        return self.users.count({"email": email, "isDeleted": False}) > 0

    def create(self, user: User) -> User:
        return self.users.insert(user)

    def update_last_login(self, user_id: str) -> Optional[User]:
        return self.users.set_fields(user_id, {"lastLogin": datetime.now(timezone.utc)})
