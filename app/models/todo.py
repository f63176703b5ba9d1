from sqlalchemy import Column, Integer, String, Text, ForeignKey
from app.database import Base

class Todo(Base):
    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=True)
