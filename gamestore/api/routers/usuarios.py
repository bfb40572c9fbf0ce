from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamestore.api.deps import require_admin_identity
from gamestore.data.database import get_db
from gamestore.domain.identity import Identity
from gamestore.domain.schemas import UserOut
from gamestore.services.user_service import UserService

router = APIRouter(prefix="/listausers", tags=["usuarios"])


@router.get("", response_model=List[UserOut])
def list_users(
    identity: Identity = Depends(require_admin_identity),
    db: Session = Depends(get_db),
):
    return UserService(db).list_users(identity)
