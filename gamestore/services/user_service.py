from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gamestore.domain.errors import InternalError
from gamestore.domain.identity import Identity
from gamestore.repos.user_repo import UserRepo
from gamestore.services.identity import require_admin
from gamestore.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def list_users(self, identity: Identity | None) -> List[Dict[str, Any]]:
        require_admin(identity)
        try:
            users = self.repo.list_users()
        except SQLAlchemyError:
            logger.exception("Failed to list users")
            self.repo.rollback()
            raise InternalError("Error interno del servidor al obtener los usuarios.")

        return [
            {
                "UsuarioID": u.id,
                "Nombre": u.nombre,
                "Correo": u.correo,
                "Alias": u.alias,
                "Foto": u.foto,
            }
            for u in users
        ]
