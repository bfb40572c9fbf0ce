"""
Error taxonomy shared by services and the HTTP layer.

Services raise these, `gamestore.api.errors` renders them as
`{"msg": ...}` with the matching status code.
"""

from __future__ import annotations


class ServiceError(Exception):
    status_code = 500
    default_message = "Error interno del servidor."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ServiceError):
    status_code = 400
    default_message = "Solicitud inválida."


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "No autorizado: Usuario no identificado."


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Acceso denegado: Se requiere rol de administrador."


class NotFound(ServiceError):
    status_code = 404
    default_message = "Recurso no encontrado."


class InternalError(ServiceError):
    pass
