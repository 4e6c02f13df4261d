"""상품 레포지토리 — 상품 및 이미지 쿼리.

Product Repository — Queries for products and their owned images.
Extends BaseRepository with slug lookup, ordered listing and the
image-set replacement used by product updates.
"""

from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.models.product import Product, ProductImage
from catalog.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the products table.
    """

    def __init__(self) -> None:
        super().__init__(Product)

    def list_query(self) -> Select:
        """목록 조회용 기본 쿼리 — 생성 순서(동률 시 id)로 정렬.

        Base listing query with a stable order: creation time, then id.
        """
        return select(Product).order_by(Product.created_at, Product.id)

    async def get_detail(
        self,
        db: AsyncSession,
        product_id: UUID,
    ) -> Product | None:
        """상품을 이미지와 함께 조회합니다.

        Retrieve a product with its images eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            product_id: 상품 ID (Product UUID)

        Returns:
            Product | None: 이미지가 로드된 상품 또는 None
        """
        query: Select = (
            select(Product)
            .options(selectinload(Product.images))
            .where(Product.id == product_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_slug(
        self,
        db: AsyncSession,
        slug: str,
    ) -> Product | None:
        """슬러그로 상품을 조회합니다. Retrieve a product by its slug."""
        return await self.get_one_by(db, {"slug": slug})

    async def apply_changes(
        self,
        db: AsyncSession,
        product: Product,
        changes: dict[str, Any],
    ) -> Product:
        """로드된 상품에 변경 필드를 덮어씁니다.

        Overwrite every field in ``changes`` on a loaded product and flush.
        Unique violations surface here as ``IntegrityError``.
        """
        for field, value in changes.items():
            setattr(product, field, value)
        await db.flush()
        return product

    async def add_images(
        self,
        db: AsyncSession,
        product: Product,
        urls: Sequence[str],
    ) -> list[ProductImage]:
        """상품 이미지 목록 끝에 URL별 이미지를 추가합니다.

        Append one image per URL to the product's list, preserving order,
        and flush so every image gets its id.
        """
        start: int = len(product.images)
        images: list[ProductImage] = [
            ProductImage(url=url, sort_order=start + index)
            for index, url in enumerate(urls)
        ]
        product.images.extend(images)
        await db.flush()
        return images

    async def replace_images(
        self,
        db: AsyncSession,
        product: Product,
        urls: Sequence[str],
    ) -> list[ProductImage]:
        """상품의 이미지 전체를 새 URL 목록으로 교체합니다.

        Delete every image the product owns, then insert the new set.
        Both steps are flushed inside the caller's transaction. The product
        row itself is unchanged, so ``updated_at`` is touched explicitly.
        """
        # 기존 이미지 삭제 — delete-orphan cascade removes the old rows
        product.images.clear()
        product.updated_at = datetime.now(timezone.utc)
        await db.flush()
        return await self.add_images(db, product, urls)


# 싱글턴 인스턴스 — Singleton instance
product_repository: ProductRepository = ProductRepository()
