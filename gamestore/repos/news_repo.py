# gamestore/repos/news_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from gamestore.data.models.noticia import NoticiaModel


class NewsRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_news(self) -> List[NoticiaModel]:
        return list(self.db.execute(select(NoticiaModel).order_by(NoticiaModel.id)).scalars().all())

    def get_news(self, noticia_id: int) -> NoticiaModel | None:
        return self.db.get(NoticiaModel, noticia_id)

    def create_news(self, noticia: NoticiaModel) -> NoticiaModel:
        self.db.add(noticia)
        self.db.commit()
        self.db.refresh(noticia)
        return noticia

    def update_news(self, noticia: NoticiaModel, titulo: str, texto: str, imagen: str | None) -> NoticiaModel:
        noticia.titulo = titulo
        noticia.texto = texto
        noticia.imagen = imagen
        self.db.commit()
        self.db.refresh(noticia)
        return noticia

    def delete_news(self, noticia: NoticiaModel) -> None:
        self.db.delete(noticia)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
