# gamestore/services/news_service.py
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gamestore.data.models.noticia import NoticiaModel
from gamestore.domain.errors import BadRequest, InternalError, NotFound
from gamestore.domain.identity import Identity
from gamestore.repos.news_repo import NewsRepo
from gamestore.services.identity import require_admin
from gamestore.utils.logging import get_logger

logger = get_logger(__name__)

_MISSING_FIELDS = "Faltan campos obligatorios: Titulo, Texto."
_NOT_FOUND = "Noticia no encontrada."


def _to_dict(noticia: NoticiaModel, full: bool = False) -> Dict[str, Any]:
    data = {
        "NoticiaID": noticia.id,
        "Titulo": noticia.titulo,
        "Texto": noticia.texto,
        "Imagen": noticia.imagen,
    }
    if full:
        data["Activo"] = bool(noticia.activo)
    return data

class NewsService:
    """
    News feed: public reads, admin-only writes.
    The role check runs before payload validation and before touching the store.
    """

    def __init__(self, db: Session):
        self.repo = NewsRepo(db)

    def list_news(self) -> List[Dict[str, Any]]:
        try:
            return [_to_dict(n) for n in self.repo.list_news()]
        except SQLAlchemyError:
            logger.exception("Failed to list news")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al obtener las noticias.")

    def get_news(self, noticia_id: int) -> Dict[str, Any]:
        try:
            noticia = self.repo.get_news(noticia_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to read news {noticia_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al obtener la noticia.")

        if noticia is None:
            raise NotFound(_NOT_FOUND)
        return _to_dict(noticia)

    def create_news(
        self,
        identity: Identity | None,
        titulo: str | None,
        texto: str | None,
        imagen: str | None = None,
    ) -> Dict[str, Any]:
        require_admin(identity)
        if not titulo or not texto:
            raise BadRequest(_MISSING_FIELDS)

        try:
            created = self.repo.create_news(
                NoticiaModel(titulo=titulo, texto=texto, imagen=imagen or None, activo=True)
            )
        except SQLAlchemyError:
            logger.exception("Failed to create news")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al crear la noticia.")

        logger.info(f"News {created.id} created by user {identity.user_id}")
        return _to_dict(created, full=True)

    def update_news(
        self,
        identity: Identity | None,
        noticia_id: int,
        titulo: str | None,
        texto: str | None,
        imagen: str | None = None,
    ) -> Dict[str, Any]:
        require_admin(identity)
        if not titulo or not texto:
            raise BadRequest(_MISSING_FIELDS)

        try:
            noticia = self.repo.get_news(noticia_id)
            if noticia is None:
                raise NotFound(_NOT_FOUND)
            # full overwrite, a missing image clears the stored one
            updated = self.repo.update_news(noticia, titulo, texto, imagen or None)
        except SQLAlchemyError:
            logger.exception(f"Failed to update news {noticia_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al actualizar la noticia.")

        logger.info(f"News {noticia_id} updated by user {identity.user_id}")
        return _to_dict(updated, full=True)

    def delete_news(self, identity: Identity | None, noticia_id: int) -> None:
        require_admin(identity)

        try:
            noticia = self.repo.get_news(noticia_id)
            if noticia is None:
                raise NotFound(_NOT_FOUND)
            self.repo.delete_news(noticia)
        except SQLAlchemyError:
            logger.exception(f"Failed to delete news {noticia_id}")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al eliminar la noticia.")

        logger.info(f"News {noticia_id} deleted by user {identity.user_id}")
