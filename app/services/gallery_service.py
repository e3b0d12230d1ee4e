# app/services/gallery_service.py
import logging
from typing import Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.models.gallery import GalleryItem
from app.schemas.common import PageParams
from app.schemas.gallery import GalleryCategory, GalleryCreate, GalleryUpdate
from app.services.storage_service import StorageService
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

GALLERY_FOLDER = "gallery"


def create_item(db: Session, data: GalleryCreate) -> GalleryItem:
    item = GalleryItem(**data.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(f"Gallery item created: {item.id} ({item.title})")
    return item


def upload_item(db: Session, storage: StorageService, file: UploadFile, data: dict) -> GalleryItem:
    """Push the image to the bucket, then record it as a gallery item."""
    if not file.content_type or not file.content_type.startswith("image/"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only image files are allowed")

    contents = file.file.read()
    if not contents:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")

    image_url = storage.upload_file(contents, file.filename, file.content_type, GALLERY_FOLDER)
    try:
        return create_item(db, GalleryCreate(image_url=image_url, **data))
    except Exception:
        db.rollback()
        try:
            storage.delete_file(image_url)
        except Exception as e:
            logger.error(f"Failed to remove uploaded image {image_url}: {str(e)}")
        raise


def list_items(
    db: Session,
    params: PageParams,
    category: Optional[GalleryCategory] = None,
    featured: Optional[bool] = None,
    is_active: Optional[bool] = None,
) -> dict:
    query = db.query(GalleryItem)
    if category is not None:
        query = query.filter(GalleryItem.category == category.value)
    if featured is not None:
        query = query.filter(GalleryItem.featured == featured)
    if is_active is not None:
        query = query.filter(GalleryItem.is_active == is_active)

    query = query.order_by(GalleryItem.sort_index.asc(), GalleryItem.created_at.desc())
    return paginate(query, params)


def get_item(db: Session, item_id: str) -> GalleryItem:
    item = db.query(GalleryItem).filter(GalleryItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Gallery item {item_id} not found")
    return item


def update_item(db: Session, item_id: str, data: GalleryUpdate) -> GalleryItem:
    item = get_item(db, item_id)
    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, storage: StorageService, item_id: str) -> None:
    item = get_item(db, item_id)
    image_url = item.image_url

    db.delete(item)
    db.commit()
    logger.info(f"Gallery item deleted: {item_id}")

    if storage.owns_url(image_url):
        try:
            storage.delete_file(image_url)
        except Exception as e:
            # Record is already removed; the object stays orphaned in the bucket
            logger.error(f"Failed to delete stored image {image_url}: {str(e)}")
