# app/routes/gallery.py
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.auth.dependencies import public
from app.database import get_db
from app.schemas.common import PageParams, Paginated
from app.schemas.gallery import GalleryCategory, GalleryCreate, GalleryResponse, GalleryUpdate
from app.services import gallery_service
from app.services.storage_service import StorageService, get_storage
from app.utils.pagination import page_params

router = APIRouter(
    prefix="/gallery",
    tags=["Gallery"]
)


@router.post("", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED)
def create_item(data: GalleryCreate, db: Session = Depends(get_db)):
    return gallery_service.create_item(db, data)


@router.post("/upload", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED)
def upload_item(
    file: UploadFile = File(...),
    title: str = Form(..., min_length=1),
    category: GalleryCategory = Form(...),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    duration: Optional[str] = Form(None),
    featured: bool = Form(False),
    is_active: bool = Form(True, alias="isActive"),
    sort_index: int = Form(0, alias="sortIndex"),
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage),
):
    """Upload an image to the bucket and create a gallery item pointing at it."""
    data = {
        "title": title,
        "category": category,
        "description": description,
        "price": price,
        "duration": duration,
        "featured": featured,
        "is_active": is_active,
        "sort_index": sort_index,
    }
    return gallery_service.upload_item(db, storage, file, data)


@router.get("", response_model=Paginated[GalleryResponse])
@public
def list_items(
    category: Optional[GalleryCategory] = Query(None),
    featured: Optional[bool] = Query(None),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    params: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
):
    return gallery_service.list_items(db, params, category, featured, is_active)


@router.get("/{item_id}", response_model=GalleryResponse)
@public
def get_item(item_id: str, db: Session = Depends(get_db)):
    return gallery_service.get_item(db, item_id)


@router.patch("/{item_id}", response_model=GalleryResponse)
def update_item(item_id: str, data: GalleryUpdate, db: Session = Depends(get_db)):
    return gallery_service.update_item(db, item_id, data)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: str,
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage),
):
    gallery_service.delete_item(db, storage, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
