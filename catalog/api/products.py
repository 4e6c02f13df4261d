"""상품 라우터 — 상품 CRUD 엔드포인트.

Product Router — CRUD endpoints for catalog products.
Transactions are owned by the product service; the handlers only parse
input and pass the request's session through.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import get_db
from catalog.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductListItem,
    ProductResponse,
    ProductUpdate,
)
from catalog.services.product_service import product_service
from catalog.utils.pagination import MAX_LIMIT, MAX_PAGE, Page

router: APIRouter = APIRouter()


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """새 상품을 이미지와 함께 생성합니다. 같은 제목이 있으면 409.

    Create a product with its images. 409 if the title is taken.
    """
    return await product_service.create_product(db, data)


@router.get("", response_model=Page[ProductListItem])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = 10,
) -> Page[ProductListItem]:
    """상품 목록을 페이지 단위로 조회합니다.

    List products, ``limit`` per page, with the overall total.
    """
    return await product_service.list_products(db, page=page, limit=limit)


@router.get("/{query}", response_model=ProductResponse)
async def get_product(
    query: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """UUID면 ID로, 아니면 슬러그로 상품을 조회합니다.

    Retrieve a product by id when ``query`` is UUID-shaped, by slug otherwise.
    """
    return await product_service.get_product(db, query)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """상품 정보를 수정합니다. images가 있으면 이미지 전체를 교체합니다.

    Update a product; a present ``images`` list replaces all images.
    """
    return await product_service.update_product(db, product_id, data)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """상품과 모든 이미지를 삭제합니다.

    Delete a product and all of its images.
    """
    await product_service.delete_product(db, product_id)
    return MessageResponse(message=f"Product with id {product_id} has been successfully removed")
