"""상품 관련 SQLAlchemy ORM 모델 정의.

Product-related SQLAlchemy ORM model definitions.
A Product exclusively owns an ordered list of ProductImage rows;
images are created and deleted together with their parent.

Tables:
    - products: 상품 (Catalog products, unique title and slug)
    - product_images: 상품 이미지 (Image URLs owned by a product)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Text, DateTime, Integer, Float, ForeignKey, Uuid, func, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

# PostgreSQL에서는 JSONB, 그 외(SQLite 테스트)에서는 JSON
# JSONB on PostgreSQL, plain JSON elsewhere
JsonList = JSON().with_variant(JSONB(), "postgresql")


class Product(Base):
    """상품 모델 — 카탈로그의 최상위 엔티티.

    Product model — Aggregate root of the catalog.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 상품명, 고유 (Product title, unique)
        slug: URL용 식별자, 고유 (URL-safe identifier, unique)
        price: 가격 (Price, defaults to 0)
        description: 설명 (Description, optional)
        in_stock: 재고 수량 (Units in stock, defaults to 0)
        sizes: 사이즈 목록 (Ordered list of size labels)
        gender: 성별 카테고리 (Gender category)
        tags: 태그 목록 (Ordered list of tags)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        images: 상품 이미지 목록 (Owned images ordered by sort_order, cascade delete)
    """

    __tablename__ = "products"

    # 상품 고유 식별자 — Product unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default=text("0"))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))
    sizes: Mapped[list[str]] = mapped_column(JsonList, nullable=False)
    gender: Mapped[str] = mapped_column(String(50), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JsonList, nullable=False, default=list, server_default=text("'[]'"))
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now())
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now(), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (cascade: 상품 삭제 시 이미지 일괄 삭제)
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.sort_order",
        lazy="selectin",
    )


class ProductImage(Base):
    """상품 이미지 모델 — 저장된 파일에 대한 URL 참조.

    Product image model — URL reference to a stored asset, owned by
    exactly one product.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        product_id: 소속 상품 FK (Parent product foreign key)
        url: 파일 URL (Asset URL or filename)
        sort_order: 정렬 순서 (Position in the product's image list)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "product_images"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 상품 FK — Parent product (CASCADE: 상품 삭제 시 이미지도 삭제)
    product_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    # 정렬 순서 — 0-based, lower = displayed first
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now())

    product: Mapped["Product"] = relationship("Product", back_populates="images")
