from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gamestore.data.models.carrito_item import CarritoItemModel
from gamestore.domain.errors import BadRequest, InternalError, NotFound, Unauthorized
from gamestore.domain.identity import Identity
from gamestore.repos.cart_repo import CartRepo
from gamestore.repos.catalog_repo import CatalogRepo
from gamestore.utils.logging import get_logger
from gamestore.utils.retry import integrity_retry

logger = get_logger(__name__)

_CENT = Decimal("0.01")


class CartService:
    """
    Cart use cases for the calling user.
    commands (add, remove, clear) change state and commit,
    query (get) only reads.
    Every store failure is logged and turned into InternalError.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.catalog = CatalogRepo(db)

    @staticmethod
    def _require_user(identity: Identity | None) -> int:
        if identity is None:
            raise Unauthorized()
        return identity.user_id

    @staticmethod
    def _to_item(line: CarritoItemModel) -> Dict[str, Any]:
        juego = line.juego
        return {
            "id": juego.id,
            "nombre": juego.nombre,
            "precio": float(juego.precio),
            "cantidad": line.cantidad,
            "imagen": juego.imagen,
        }

    @staticmethod
    def subtotal(lines: List[CarritoItemModel]) -> float:
        total = sum((Decimal(str(l.juego.precio)) * l.cantidad for l in lines), Decimal("0.00"))
        return float(total.quantize(_CENT, rounding=ROUND_HALF_UP))

    def _items(self, usuario_id: int) -> List[Dict[str, Any]]:
        return [self._to_item(line) for line in self.repo.get_cart_items(usuario_id)]

    #query
    def get_cart(self, identity: Identity | None) -> Dict[str, Any]:
        usuario_id = self._require_user(identity)
        try:
            lines = self.repo.get_cart_items(usuario_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to read cart of user {usuario_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al obtener el carrito.")

        return {
            "items": [self._to_item(line) for line in lines],
            "subtotal": self.subtotal(lines),
        }

    #commands
    def add_item(self, identity: Identity | None, juego_id: int | None, cantidad: int | None) -> List[Dict[str, Any]]:
        usuario_id = self._require_user(identity)

        if juego_id is None or cantidad is None or cantidad < 1:
            raise BadRequest("Debe enviar 'juegoId' (número) y 'cantidad' (número > 0).")

        try:
            if self.catalog.get_juego(juego_id) is None:
                raise NotFound("Juego no encontrado.")

            self._upsert_item(usuario_id, juego_id, cantidad)
            return self._items(usuario_id)

        except SQLAlchemyError:
            logger.exception(f"Failed to add juego {juego_id} to cart of user {usuario_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al añadir/actualizar ítem.")

    @integrity_retry()
    def _upsert_item(self, usuario_id: int, juego_id: int, cantidad: int) -> None:
        # quantity is overwritten, not summed with the previous value
        existing = self.repo.get_cart_item(usuario_id, juego_id)
        try:
            if existing:
                logger.info(
                    f"Juego {juego_id} already in cart of user {usuario_id}, "
                    f"cantidad {existing.cantidad} -> {cantidad}"
                )
                existing.cantidad = cantidad
                self.repo.add_cart_item(existing)
            else:
                logger.info(f"Adding juego {juego_id} to cart of user {usuario_id}")
                self.repo.add_cart_item(
                    CarritoItemModel(
                        usuario_id=usuario_id,
                        juego_id=juego_id,
                        cantidad=cantidad,
                    )
                )
            self.repo.commit()
        except IntegrityError:
            # lost the insert race against another request for the same pair
            logger.warning(f"Unique conflict on (user {usuario_id}, juego {juego_id}), retrying as update")
            self.repo.rollback()
            raise

    def remove_item(self, identity: Identity | None, juego_id: int) -> List[Dict[str, Any]]:
        usuario_id = self._require_user(identity)

        try:
            item = self.repo.get_cart_item(usuario_id, juego_id)
            if item is None:
                raise NotFound("El juego no se encontró en el carrito de este usuario.")

            logger.info(f"Removing juego {juego_id} from cart of user {usuario_id}")
            self.repo.delete_cart_item(item)
            self.repo.commit()

            return self._items(usuario_id)

        except SQLAlchemyError:
            logger.exception(f"Failed to remove juego {juego_id} from cart of user {usuario_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al eliminar ítem.")

    def clear_cart(self, identity: Identity | None) -> int:
        usuario_id = self._require_user(identity)

        try:
            removed = self.repo.delete_all_items(usuario_id)
            self.repo.commit()
        except SQLAlchemyError:
            logger.exception(f"Failed to clear cart of user {usuario_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al vaciar el carrito.")

        logger.info(f"Cleared cart of user {usuario_id}, {removed} lines removed")
        return removed
