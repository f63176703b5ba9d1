import logging
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.errors import storage_unavailable
from app.models.todo import Todo
from app.schemas.todo import TodoCreate

logger = logging.getLogger(__name__)

class TodoRepository:
    """Statements against the ``todos`` table.

    Every driver failure is rolled back and re-raised as a
    ``STORAGE_UNAVAILABLE`` error carrying the driver's message.
    """

    async def list_all(self, db: AsyncSession) -> list[Todo]:
        try:
            result = await db.execute(select(Todo).order_by(Todo.id.asc()))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await db.rollback()
            raise storage_unavailable(str(e)) from e

    async def insert_one(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        todo = Todo(**todo_in.model_dump())
        db.add(todo)
        try:
            await db.commit()
            await db.refresh(todo)
        except SQLAlchemyError as e:
            await db.rollback()
            raise storage_unavailable(str(e)) from e
        logger.info("Created todo %s", todo.id)
        return todo

    async def delete_by_id(self, db: AsyncSession, todo_id: int) -> None:
        # row count is not checked: deleting a missing id is a no-op
        try:
            await db.execute(delete(Todo).where(Todo.id == todo_id))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise storage_unavailable(str(e)) from e
        logger.info("Deleted todo %s", todo_id)
