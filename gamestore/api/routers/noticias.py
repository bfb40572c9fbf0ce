# gamestore/api/routers/noticias.py
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from gamestore.api.deps import require_admin_identity
from gamestore.data.database import get_db
from gamestore.domain.identity import Identity
from gamestore.domain.schemas import DB_INT_MAX, DB_INT_MIN, MsgOut, NoticiaIn, NoticiaMsgOut, NoticiaOut
from gamestore.services.news_service import NewsService

router = APIRouter(prefix="/noticias", tags=["noticias"])


def get_service(db: Session):
    return NewsService(db)


@router.get("", response_model=List[NoticiaOut])
def list_news(db: Session = Depends(get_db)):
    return get_service(db).list_news()


@router.get("/{noticia_id}", response_model=NoticiaOut)
def get_news(
    noticia_id: int = Path(ge=DB_INT_MIN, le=DB_INT_MAX),
    db: Session = Depends(get_db),
):
    return get_service(db).get_news(noticia_id)


@router.post("", response_model=NoticiaMsgOut, status_code=201)
def create_news(
    payload: NoticiaIn,
    identity: Identity = Depends(require_admin_identity),
    db: Session = Depends(get_db),
):
    noticia = get_service(db).create_news(identity, payload.titulo, payload.texto, payload.imagen)
    return {"msg": "Noticia creada con éxito.", "noticia": noticia}


@router.put("/{noticia_id}", response_model=NoticiaMsgOut)
def update_news(
    payload: NoticiaIn,
    noticia_id: int = Path(ge=DB_INT_MIN, le=DB_INT_MAX),
    identity: Identity = Depends(require_admin_identity),
    db: Session = Depends(get_db),
):
    noticia = get_service(db).update_news(identity, noticia_id, payload.titulo, payload.texto, payload.imagen)
    return {"msg": "Noticia actualizada con éxito.", "noticia": noticia}


@router.delete("/{noticia_id}", response_model=MsgOut)
def delete_news(
    noticia_id: int = Path(ge=DB_INT_MIN, le=DB_INT_MAX),
    identity: Identity = Depends(require_admin_identity),
    db: Session = Depends(get_db),
):
    get_service(db).delete_news(identity, noticia_id)
    return {"msg": "Noticia eliminada con éxito."}
