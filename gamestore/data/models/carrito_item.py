from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from gamestore.data.database import Base


class CarritoItemModel(Base):
    __tablename__ = "carrito_items"

    id = Column("CarritoItemID", Integer, primary_key=True)
    usuario_id = Column(
        "UsuarioID", Integer, ForeignKey("usuarios.UsuarioID", ondelete="CASCADE"), nullable=False, index=True
    )
    juego_id = Column("JuegoID", Integer, ForeignKey("juegos.JuegoID", ondelete="CASCADE"), nullable=False)

    cantidad = Column("Cantidad", Integer, nullable=False)

    juego = relationship("JuegoModel", lazy="joined")

    # one line per (user, juego), enforced by the store
    __table_args__ = (
        UniqueConstraint("UsuarioID", "JuegoID", name="u_usuario_juego"),
        CheckConstraint(cantidad >= 1, name="ck_cantidad_positiva"),
    )
