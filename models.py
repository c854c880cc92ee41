from pydantic import BaseModel
from typing import Optional


class PropertyCreate(BaseModel):
    name: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None
    sqft: Optional[str] = None


class Property(PropertyCreate):
    id: int
    image: str = ""
