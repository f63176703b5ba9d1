from pydantic import BaseModel, ConfigDict
from typing import Optional

class UserOut(BaseModel):
    id: str
    name: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
