from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.errors import storage_unavailable
from app.models.user import User

class UserRepository:
    async def list_all(self, db: AsyncSession) -> list[User]:
        try:
            result = await db.execute(select(User).order_by(User.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await db.rollback()
            raise storage_unavailable(str(e)) from e
