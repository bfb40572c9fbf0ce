from sqlalchemy import Column, Integer, String
from gamestore.data.database import Base

class UserModel(Base):
    __tablename__ = "usuarios"
    id = Column("UsuarioID", Integer, primary_key=True)
    nombre = Column("Nombre", String(100), nullable=False)
    correo = Column("Correo", String(320), nullable=False, unique=True)
    alias = Column("Alias", String(50), nullable=True)
    foto = Column("Foto", String(255), nullable=True)
