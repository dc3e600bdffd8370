from fastapi import APIRouter, Depends, status

from personnel_api.db.repository import EntityKind, Repository
from personnel_api.db.session import get_repository
from personnel_api.schemas.user import UserCreate, UserOut

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=list[UserOut])
def list_users(repo: Repository = Depends(get_repository)):
    return [UserOut(**r) for r in repo.list_all(EntityKind.USER)]


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, repo: Repository = Depends(get_repository)):
    return UserOut(**repo.get_by_id(EntityKind.USER, user_id))


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, repo: Repository = Depends(get_repository)):
    # legacy table: the store assigns the id
    new_id = repo.create(EntityKind.USER, payload.model_dump())
    return UserOut(id=new_id, name=payload.name, email=payload.email)
