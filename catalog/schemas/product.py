"""상품 관련 Pydantic 요청/응답 스키마 정의.

Product request/response schema definitions.
Field constraints here are the boundary validation; the product service
assumes its input already passed them.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class ProductCreate(BaseModel):
    """상품 생성 요청 스키마.

    Product creation request schema.
    ``slug`` is derived from ``title`` when omitted; ``images`` holds URLs
    returned by the file storage endpoints.

    Attributes:
        title: 상품명 (Product title, unique)
        price: 가격, 양수 (Price, must be positive when given)
        description: 설명 (Description, optional)
        slug: URL 식별자 (Slug, optional)
        in_stock: 재고 수량 (Units in stock)
        sizes: 사이즈 목록, 1~10개 (1 to 10 size labels)
        gender: 성별 카테고리 (Gender category)
        tags: 태그 목록 (Tags, optional)
        images: 이미지 URL 목록 (Image URLs, optional)
    """

    title: str = Field(..., min_length=1)
    price: float | None = Field(None, gt=0)
    description: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    in_stock: int = Field(0, ge=0)
    sizes: list[str] = Field(..., min_length=1, max_length=10)
    gender: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """상품 수정 요청 스키마 (부분 업데이트).

    Product update request schema (partial update).
    Only fields present in the request body are applied; ``images``, when
    present, replaces the whole image list. Explicit ``null`` is accepted
    only for nullable columns (``description``) and for ``slug``, which
    then gets re-derived from the title.
    """

    title: str | None = Field(None, min_length=1)
    price: float | None = Field(None, gt=0)
    description: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    in_stock: int | None = Field(None, ge=0)
    sizes: list[str] | None = Field(None, min_length=1, max_length=10)
    gender: str | None = Field(None, min_length=1)
    tags: list[str] | None = None
    images: list[str] | None = None

    @field_validator("title", "price", "in_stock", "sizes", "gender", "tags", "images", mode="before")
    @classmethod
    def reject_null(cls, value):
        """필수 컬럼에 명시적 null 금지 — Omit the field instead of sending null."""
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProductImageResponse(BaseModel):
    id: str
    url: str


class ProductResponse(BaseModel):
    """상품 상세 응답 스키마.

    Product detail response schema with its images.
    """

    id: str
    title: str
    slug: str
    price: float
    description: str | None = None
    in_stock: int
    sizes: list[str]
    gender: str
    tags: list[str]
    images: list[ProductImageResponse] = []
    created_at: datetime
    updated_at: datetime


class ProductListItem(BaseModel):
    """상품 목록 항목 스키마 — 이미지는 URL만 포함.

    Product list item; images are flattened to their URLs.
    """

    id: str
    title: str
    slug: str
    description: str | None = None
    price: float
    images: list[str] = []


class MessageResponse(BaseModel):
    message: str
