from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
from typing import List, Optional
from database import PropertyStore, PropertyNotFound, get_property_store, UPLOAD_DIR
from models import Property, PropertyCreate
from utils.file_utils import save_upload, remove_upload
import logging
import re

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter(tags=["properties"])

TEXT_FIELDS = ("name", "price", "location", "sqft")
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_property_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment, so "12abc" is 12 and "abc" is None."""
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


@router.post("/properties", response_model=Property, response_model_exclude_none=True, status_code=201)
async def create_property(request: Request, store: PropertyStore = Depends(get_property_store)):
    # Read the form directly: Form() parameters turn "" into a missing value
    async with request.form() as form:
        fields = PropertyCreate(**{
            key: form[key] for key in TEXT_FIELDS if isinstance(form.get(key), str)
        })
        image = form.get("image")
        image_path = ""
        # Browsers send an empty file part when nothing was picked
        if isinstance(image, UploadFile) and image.filename:
            image_path = await save_upload(image, UPLOAD_DIR)

    record = store.create(fields, image=image_path)
    logger.info(f"Created property {record.id}")
    return record


@router.get("/properties", response_model=List[Property], response_model_exclude_none=True)
def get_properties(store: PropertyStore = Depends(get_property_store)):
    return store.all()


@router.delete("/properties/{property_id}")
def delete_property(property_id: str, store: PropertyStore = Depends(get_property_store)):
    parsed_id = parse_property_id(property_id)
    try:
        record = store.remove(parsed_id)
    except PropertyNotFound:
        return JSONResponse(status_code=404, content={"message": "Property not found"})

    if record.image:
        remove_upload(record.image, UPLOAD_DIR)
    logger.info(f"Deleted property {parsed_id}")
    return {"message": "Property deleted successfully"}
