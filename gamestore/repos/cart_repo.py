# gamestore/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gamestore.data.models.carrito_item import CarritoItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, usuario_id: int) -> List[CarritoItemModel]:
        # juego is loaded eagerly (lazy="joined") for the item projection
        stmt = (
            select(CarritoItemModel)
            .where(CarritoItemModel.usuario_id == usuario_id)
            .order_by(CarritoItemModel.id)
        )
        return list(self.db.execute(stmt).unique().scalars().all())

    def get_cart_item(self, usuario_id: int, juego_id: int) -> CarritoItemModel | None:
        stmt = select(CarritoItemModel).where(
            CarritoItemModel.usuario_id == usuario_id,
            CarritoItemModel.juego_id == juego_id,
        )
        return self.db.execute(stmt).unique().scalar_one_or_none()

    def add_cart_item(self, item: CarritoItemModel) -> CarritoItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_cart_item(self, item: CarritoItemModel) -> None:
        self.db.delete(item)
        self.db.flush()

    def delete_all_items(self, usuario_id: int) -> int:
        result = self.db.execute(
            delete(CarritoItemModel).where(CarritoItemModel.usuario_id == usuario_id)
        )
        return result.rowcount or 0

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
