# app/services/storage_service.py
import logging
import os
import time
from typing import Optional
from urllib.parse import quote, unquote, urlparse

import firebase_admin
from fastapi import HTTPException, status
from firebase_admin import credentials, storage

from app.config import settings

logger = logging.getLogger(__name__)

PUBLIC_HOST = "storage.googleapis.com"


class StorageService:
    """Public file hosting in the Firebase Storage bucket."""

    def __init__(self, cfg=settings):
        self.cfg = cfg
        self._bucket = None

    def init(self) -> None:
        if self._bucket is not None:
            return

        if not self.cfg.storage_configured:
            if self.cfg.ENVIRONMENT == "test":
                logger.info("[StorageService] Skipping Firebase initialization in test environment")
            else:
                logger.warning("[StorageService] Firebase credentials missing, uploads disabled")
            return

        try:
            app = firebase_admin.get_app()
        except ValueError:
            cred = credentials.Certificate({
                "type": "service_account",
                "project_id": self.cfg.FIREBASE_PROJECT_ID,
                # Keys pasted into env files usually carry escaped newlines
                "private_key": self.cfg.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
                "client_email": self.cfg.FIREBASE_CLIENT_EMAIL,
                "token_uri": "https://oauth2.googleapis.com/token",
            })
            app = firebase_admin.initialize_app(cred, {"storageBucket": self.cfg.FIREBASE_STORAGE_BUCKET})

        self._bucket = storage.bucket(app=app)
        logger.info(f"[StorageService] Using bucket {self.cfg.FIREBASE_STORAGE_BUCKET}")

    @property
    def bucket(self):
        self.init()
        if self._bucket is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="File storage is not configured"
            )
        return self._bucket

    @property
    def _url_prefix(self) -> str:
        return f"/{self.cfg.FIREBASE_STORAGE_BUCKET}/"

    def owns_url(self, file_url: Optional[str]) -> bool:
        if not file_url:
            return False
        parsed = urlparse(file_url)
        return parsed.netloc == PUBLIC_HOST and parsed.path.startswith(self._url_prefix)

    def upload_file(self, data: bytes, filename: str, content_type: str, folder: str) -> str:
        safe_name = os.path.basename(filename or "upload").replace(" ", "-")
        object_name = f"{folder}/{int(time.time() * 1000)}-{safe_name}"

        blob = self.bucket.blob(object_name)
        blob.upload_from_string(data, content_type=content_type)
        blob.make_public()

        logger.info(f"Uploaded {object_name} ({len(data)} bytes)")
        return f"https://{PUBLIC_HOST}/{self.cfg.FIREBASE_STORAGE_BUCKET}/{quote(object_name)}"

    def delete_file(self, file_url: str) -> None:
        if not self.owns_url(file_url):
            raise ValueError(f"URL does not point into bucket {self.cfg.FIREBASE_STORAGE_BUCKET}")

        object_name = unquote(urlparse(file_url).path[len(self._url_prefix):])
        self.bucket.blob(object_name).delete()
        logger.info(f"Deleted {object_name}")


storage_service = StorageService()


def get_storage() -> StorageService:
    return storage_service
