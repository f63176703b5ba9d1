from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.user import UserOut
from app.repositories.user_repo import UserRepository
from app.database import get_db

router = APIRouter()
repo = UserRepository()

# Users are seeded at startup; the service never writes them.
@router.get("", response_model=list[UserOut])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await repo.list_all(db)
