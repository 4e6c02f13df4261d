"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application.

Included routers:
    - products: 상품 CRUD (Product CRUD with images)
    - files: 상품 이미지 업로드 (Product image uploads)
"""

from fastapi import APIRouter

from catalog.api.files import router as files_router
from catalog.api.products import router as products_router

api_router: APIRouter = APIRouter()

api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(files_router, prefix="/files", tags=["Files"])
