from sqlalchemy import Boolean, Column, Integer, String, Text

from gamestore.data.database import Base


class NoticiaModel(Base):
    __tablename__ = "noticias"

    id = Column("NoticiaID", Integer, primary_key=True)
    titulo = Column("Titulo", String(200), nullable=False)
    texto = Column("Texto", Text, nullable=False)
    imagen = Column("Imagen", String(255), nullable=True)
    activo = Column("Activo", Boolean, nullable=False, default=True)
