from sqlalchemy.orm import Session
from gamestore.data.models.juego import JuegoModel

class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_juego(self, juego_id: int) -> JuegoModel | None:
        return self.db.get(JuegoModel, juego_id)
