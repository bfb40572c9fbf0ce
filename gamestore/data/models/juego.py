#gamestore/data/models/juego.py
from sqlalchemy import Column, Integer, Numeric, String

from gamestore.data.database import Base


class JuegoModel(Base):
    __tablename__ = "juegos"

    id = Column("JuegoID", Integer, primary_key=True)
    nombre = Column("Nombre", String(150), nullable=False)
    precio = Column("Precio", Numeric(10, 2), nullable=False)
    imagen = Column("Imagen", String(255), nullable=True)
