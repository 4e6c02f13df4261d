"""파일 라우터 — 상품 이미지 업로드 URL 발급 + 로컬 업로드 API.

File Router — Issues upload URLs for product images (S3 or local).
In local mode the PUT endpoint receives the bytes directly.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from catalog.services.storage_service import storage_service

router: APIRouter = APIRouter()


class PresignedUrlRequest(BaseModel):
    filename: str = Field(..., min_length=1)
    content_type: str = "application/octet-stream"
    folder: str = Field("products", pattern=r"^[a-z0-9_-]+$")


class PresignedUrlResponse(BaseModel):
    upload_url: str
    file_url: str


class UploadResponse(BaseModel):
    file_url: str


@router.post("/presigned-url", response_model=PresignedUrlResponse)
async def create_presigned_url(data: PresignedUrlRequest) -> dict:
    """업로드 URL을 발급합니다. file_url을 상품 images에 넣으면 됩니다."""
    result = storage_service.generate_presigned_upload_url(
        filename=data.filename,
        content_type=data.content_type,
        folder=data.folder,
    )
    return {"upload_url": result["upload_url"], "file_url": result["file_url"]}


@router.put("/upload/{key:path}", response_model=UploadResponse)
async def upload_local(key: str, request: Request) -> dict:
    """로컬 모드 전용 — 파일을 서버에 직접 저장합니다.

    Local mode only: stores the raw request body under ``key``.
    """
    body = await request.body()
    return {"file_url": storage_service.save_local(key, body)}
