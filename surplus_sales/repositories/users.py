# surplus_sales/repositories/users.py

import logging

from surplus_sales.core.exceptions import ConflictError, NotFoundError
from surplus_sales.core.hashing import hash_password, verify_password
from surplus_sales.models.users import ROLE_STAFF, User
from surplus_sales.repositories.base import BaseRepository

logger = logging.getLogger("surplus_sales")


class UserRepository(BaseRepository):
    model = User
    label = "User"

    def list(self):
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def get_by_email(self, email: str):
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def email_exists(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def create(self, full_name: str, email: str, password: str, role: str | None = None):
        if self.email_exists(email):
            raise ConflictError("Email already in use")

        user = User(
            full_name=full_name,
            email=email,
            password_hash=hash_password(password),
            role=role or ROLE_STAFF,
            is_active=True,
        )
        return self._save(user, "create user")

    def update(self, user_id: str, data: dict):
        user = self.get(user_id)

        new_email = data.get("email")
        if new_email and new_email != user.email:
            if self.email_exists(new_email):
                raise ConflictError("Email already in use")
            user.email = new_email

        if data.get("full_name"):
            user.full_name = data["full_name"]

        if data.get("role"):
            user.role = data["role"]

        return self._save(user, f"update user {user_id}")

    def update_password(self, user_id: str, new_password: str) -> None:
        user = self.get(user_id)
        user.password_hash = hash_password(new_password)
        self._commit(f"update password for user {user_id}")

    def set_active(self, user_id: str, active: bool):
        user = self.get(user_id)
        user.is_active = active
        return self._save(user, f"set active={active} for user {user_id}")

    def authenticate(self, email: str, password: str):
        """Return the user when the credentials match, otherwise None."""
        user = self.db.query(User).filter(User.email == email).first()

        if user is None or not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for {email}")
            return None

        return user
