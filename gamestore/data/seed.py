# gamestore/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from gamestore.data.database import Base, SessionLocal, engine, session_scope
from gamestore.data.models import JuegoModel, NoticiaModel, UserModel
from gamestore.utils.logging import get_logger

logger = get_logger(__name__)

JUEGOS = [
    {"id": 1, "nombre": "Hollow Knight", "precio": Decimal("14.99"), "imagen": "hollow-knight.jpg"},
    {"id": 2, "nombre": "Celeste", "precio": Decimal("19.99"), "imagen": "celeste.jpg"},
    {"id": 3, "nombre": "Stardew Valley", "precio": Decimal("13.99"), "imagen": "stardew-valley.jpg"},
    {"id": 4, "nombre": "Hades", "precio": Decimal("24.50"), "imagen": "hades.jpg"},
    {"id": 5, "nombre": "The Witcher 3", "precio": Decimal("29.99"), "imagen": "witcher3.jpg"},
]


def seed(factory: sessionmaker = SessionLocal) -> bool:
    """Loads dev data. Only seeds an empty catalog, returns True when it did."""
    with session_scope(factory) as db:
        if db.query(JuegoModel).first():
            return False

        db.add(UserModel(id=1, nombre="Administrador", correo="admin@gamestore.local", alias="admin"))
        db.add_all(JuegoModel(**j) for j in JUEGOS)
        db.add(
            NoticiaModel(
                titulo="Bienvenidos",
                texto="La tienda ya está abierta.",
                imagen=None,
                activo=True,
            )
        )

    logger.info(f"Seeded {len(JUEGOS)} juegos, 1 usuario, 1 noticia")
    return True


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    seed()
