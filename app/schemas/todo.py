from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional

class TodoBase(BaseModel):
    title: str

class TodoCreate(TodoBase):
    # older clients send the text as "task"
    title: str = Field(validation_alias=AliasChoices("title", "task"))
    user_id: Optional[str] = None

class TodoOut(TodoBase):
    id: int
    user_id: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
