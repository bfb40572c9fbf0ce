# gamestore/domain/schemas.py
from pydantic import BaseModel, BeforeValidator, Field, ConfigDict
from typing import Annotated, Any, List, Optional

# INTEGER column range, larger values never reach the driver
DB_INT_MIN = -(2**31)
DB_INT_MAX = 2**31 - 1


def _json_number(value: Any) -> Any:
    # any JSON number is accepted (2.0 counts as 2), strings and booleans are not
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("debe ser un número")
    return value


DbInt = Annotated[int, BeforeValidator(_json_number), Field(ge=DB_INT_MIN, le=DB_INT_MAX)]


class CartItemIn(BaseModel):
    """Body of POST /api/carrito/items, range checks happen in CartService."""

    juego_id: Optional[DbInt] = Field(default=None, alias="juegoId")
    cantidad: Optional[DbInt] = None

    model_config = ConfigDict(populate_by_name=True)


class CartItemOut(BaseModel):
    """Cart line flattened with its catalog item."""

    id: int
    nombre: str
    precio: float
    cantidad: int
    imagen: Optional[str] = None


class CartOut(BaseModel):
    items: List[CartItemOut]
    subtotal: float


class CartItemsOut(BaseModel):
    msg: str
    items: List[CartItemOut]


class MsgOut(BaseModel):
    msg: str


class NoticiaIn(BaseModel):
    """Body of POST/PUT /noticias, required fields are checked in NewsService."""

    titulo: Optional[str] = Field(default=None, alias="Titulo")
    texto: Optional[str] = Field(default=None, alias="Texto")
    imagen: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class NoticiaOut(BaseModel):
    id: int = Field(alias="NoticiaID")
    titulo: str = Field(alias="Titulo")
    texto: str = Field(alias="Texto")
    imagen: Optional[str] = Field(default=None, alias="Imagen")

    model_config = ConfigDict(populate_by_name=True)


class NoticiaFullOut(NoticiaOut):
    activo: bool = Field(alias="Activo")


class NoticiaMsgOut(BaseModel):
    msg: str
    noticia: NoticiaFullOut


class UserOut(BaseModel):
    id: int = Field(alias="UsuarioID")
    nombre: str = Field(alias="Nombre")
    correo: str = Field(alias="Correo")
    alias: Optional[str] = Field(default=None, alias="Alias")
    foto: Optional[str] = Field(default=None, alias="Foto")

    model_config = ConfigDict(populate_by_name=True)
