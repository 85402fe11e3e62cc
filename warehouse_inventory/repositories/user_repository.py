# warehouse_inventory/repositories/user_repository.py
from typing import Optional

from warehouse_inventory.models import User
from warehouse_inventory.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):

    model = User

    def find_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.session.query(
            self.session.query(User).filter(User.username == username).exists()
        ).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.session.query(
            self.session.query(User).filter(User.email == email).exists()
        ).scalar()
