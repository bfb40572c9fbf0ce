from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session
from gamestore.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars().all())

    def rollback(self) -> None:
        self.db.rollback()
