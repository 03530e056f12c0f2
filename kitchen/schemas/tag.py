# kitchen/schemas/tag.py

from pydantic import BaseModel


class TagCreate(BaseModel):
    name: str | None = None


class TagResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
