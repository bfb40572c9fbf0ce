#gamestore/api/routers/carrito.py
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from gamestore.api.deps import require_identity
from gamestore.data.database import get_db
from gamestore.domain.identity import Identity
from gamestore.domain.schemas import (
    CartItemIn,
    CartItemsOut,
    CartOut,
    DB_INT_MAX,
    DB_INT_MIN,
    MsgOut,
)
from gamestore.services.cart_service import CartService

router = APIRouter(prefix="/api/carrito", tags=["carrito"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(identity)


@router.post("/items", response_model=CartItemsOut)
def add_item(
    payload: CartItemIn,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    items = get_service(db).add_item(identity, payload.juego_id, payload.cantidad)
    return {"msg": "Ítem añadido/actualizado en el carrito con éxito.", "items": items}


@router.delete("/items/{juego_id}", response_model=CartItemsOut)
def remove_item(
    juego_id: int = Path(ge=DB_INT_MIN, le=DB_INT_MAX),
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    items = get_service(db).remove_item(identity, juego_id)
    return {"msg": "Ítem eliminado del carrito con éxito.", "items": items}


@router.delete("", response_model=MsgOut)
def clear_cart(
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    get_service(db).clear_cart(identity)
    return {"msg": "Carrito vaciado con éxito."}
