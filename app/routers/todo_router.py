from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.todo import TodoCreate, TodoOut
from app.repositories.todo_repo import TodoRepository
from app.database import get_db

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

router = APIRouter()
repo = TodoRepository()

@router.get("", response_model=list[TodoOut])
async def list_todos(db: AsyncSession = Depends(get_db)):
    return await repo.list_all(db)

@router.post("", response_model=TodoOut, status_code=status.HTTP_201_CREATED)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await repo.insert_one(db, todo_in)

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int = Path(ge=MIN_ID, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    await repo.delete_by_id(db, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
