"""스토리지 서비스 — 상품 이미지 파일 저장 (S3 또는 로컬).

Storage Service — Where product image files live.
Issues an upload URL plus the file URL a client then embeds in a product's
``images``. Uses S3 presigned PUT URLs when AWS credentials and a bucket
are configured, otherwise a local directory served under ``/uploads``.
File contents are never inspected.
"""

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

from catalog.config import settings
from catalog.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# 로컬 업로드 디렉토리 — LOCAL_UPLOADS_DIR 또는 프로젝트 루트의 uploads/
_PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent
UPLOADS_DIR: Path = Path(settings.LOCAL_UPLOADS_DIR) if settings.LOCAL_UPLOADS_DIR else _PROJECT_ROOT / "uploads"


class StorageService:
    """파일 업로드 서비스 — S3 또는 로컬 모드 자동 선택."""

    def __init__(self, uploads_dir: Path = UPLOADS_DIR) -> None:
        self._client = None
        self.uploads_dir: Path = uploads_dir

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_S3_BUCKET

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    def _generate_key(self, filename: str, folder: str) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        date_prefix = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"{folder}/{date_prefix}/{uuid.uuid4().hex}.{ext}"

    def file_url(self, key: str) -> str:
        """저장 키에 대한 공개 URL을 반환합니다. Public URL for a storage key."""
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/uploads/{key}"
        return f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/{key}"

    def generate_presigned_upload_url(
        self,
        filename: str,
        content_type: str,
        folder: str = "products",
        expires: int = 3600,
    ) -> dict[str, str]:
        """업로드 URL과 최종 file URL을 반환합니다.

        Returns ``upload_url`` (where the client PUTs the bytes), ``file_url``
        (what goes into a product's ``images``) and the storage ``key``.
        In local mode the upload URL points at this server's upload sink.
        """
        key = self._generate_key(filename, folder)

        if self.is_local:
            base = settings.PUBLIC_BASE_URL.rstrip("/")
            upload_url = f"{base}/api/v1/files/upload/{key}"
            return {"upload_url": upload_url, "file_url": self.file_url(key), "key": key}

        upload_url = self.client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": settings.AWS_S3_BUCKET,
                "Key": key,
                "ContentType": content_type,
            },
            ExpiresIn=expires,
        )
        return {"upload_url": upload_url, "file_url": self.file_url(key), "key": key}

    def _local_path(self, key: str) -> Path:
        root = self.uploads_dir.resolve()
        path = (root / key).resolve()
        if root not in path.parents:
            raise BadRequestError("Invalid storage key")
        return path

    def save_local(self, key: str, data: bytes) -> str:
        """로컬 파일 저장. 저장된 파일의 공개 URL을 반환합니다.

        Raises:
            BadRequestError: 로컬 모드가 아니거나 키가 업로드 디렉토리를 벗어날 때
                (Not in local mode, or the key escapes the upload directory)
        """
        if not self.is_local:
            raise BadRequestError("Direct uploads are only available in local storage mode")
        if not data:
            raise BadRequestError("Make sure you are sending a file")

        path = self._local_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("Stored %d bytes at %s", len(data), path)
        return self.file_url(key)


storage_service: StorageService = StorageService()
