# kitchen/routers/locations.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kitchen.database import get_db
from kitchen.schemas.location import LocationResponse
from kitchen.services.inventory import list_locations as fetch_locations

router = APIRouter(tags=["Locations"])


@router.get("/locations", response_model=list[LocationResponse])
def list_locations(db: Session = Depends(get_db)):
    return fetch_locations(db)
