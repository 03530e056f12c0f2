# kitchen/routers/tags.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kitchen.database import get_db
from kitchen.schemas.tag import TagCreate, TagResponse
from kitchen.services import tags as tag_service

router = APIRouter(tags=["Tags"])


@router.get("/tags", response_model=list[TagResponse])
def list_tags(db: Session = Depends(get_db)):
    return tag_service.list_tags(db)


@router.post(
    "/tag",
    response_model=TagResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_tag(
    tag_data: TagCreate,
    db: Session = Depends(get_db),
):
    return tag_service.create_tag(db, tag_data.name)
