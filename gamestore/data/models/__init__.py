# import all models so SQLAlchemy registers them in Base.metadata

from gamestore.data.models.user import UserModel
from gamestore.data.models.juego import JuegoModel
from gamestore.data.models.carrito_item import CarritoItemModel
from gamestore.data.models.noticia import NoticiaModel

__all__ = ["UserModel", "JuegoModel", "CarritoItemModel", "NoticiaModel"]
