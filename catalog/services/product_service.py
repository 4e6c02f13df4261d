"""상품 서비스 — 상품 CRUD 비즈니스 로직.

Product Service — Business logic for catalog products.
Every mutating operation runs as one unit of work on the request's
session: it either commits all of its writes (product row and image rows)
or rolls every one of them back.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.product import Product
from catalog.repositories.product_repository import product_repository
from catalog.schemas.product import (
    ProductCreate,
    ProductImageResponse,
    ProductListItem,
    ProductResponse,
    ProductUpdate,
)
from catalog.utils.exceptions import (
    BadRequestError,
    DuplicateError,
    InternalServerError,
    NotFoundError,
    error_detail,
)
from catalog.utils.pagination import Page, paginate
from catalog.utils.slug import generate_slug, is_valid_uuid

logger = logging.getLogger(__name__)


class ProductService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product business logic: transactional create, update
    and delete of a product with its owned images, paginated listing, and
    lookup by id or slug.
    """

    def _to_response(self, product: Product) -> ProductResponse:
        """상품 모델을 상세 응답 스키마로 변환합니다."""
        return ProductResponse(
            id=str(product.id),
            title=product.title,
            slug=product.slug,
            price=product.price,
            description=product.description,
            in_stock=product.in_stock,
            sizes=list(product.sizes),
            gender=product.gender,
            tags=list(product.tags),
            images=[
                ProductImageResponse(id=str(image.id), url=image.url)
                for image in product.images
            ],
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def _to_list_item(self, product: Product) -> ProductListItem:
        return ProductListItem(
            id=str(product.id),
            title=product.title,
            slug=product.slug,
            description=product.description,
            price=product.price,
            images=[image.url for image in product.images],
        )

    def _slug_for(self, title: str) -> str:
        slug: str = generate_slug(title)
        if not slug:
            raise BadRequestError(f"Cannot derive a slug from title: {title!r}")
        return slug

    async def create_product(
        self,
        db: AsyncSession,
        data: ProductCreate,
    ) -> ProductResponse:
        """새 상품을 이미지와 함께 생성합니다.

        Create a product and its images in a single transaction.

        The title is checked for uniqueness first; a missing slug is derived
        from the title. The product row is flushed with an empty image list,
        then one image row per URL is inserted in order, and the whole unit
        is committed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 상품 생성 데이터 (Product creation data)

        Returns:
            ProductResponse: 생성된 상품 응답 (Created product with image ids)

        Raises:
            DuplicateError: 같은 제목의 상품이 이미 존재할 때 (Title already taken)
            BadRequestError: 제목에서 슬러그를 만들 수 없을 때 (Title yields an empty slug)
            InternalServerError: 그 외 저장 실패 (Any other storage failure, rolled back)
        """
        try:
            existing: Product | None = await product_repository.get_one_by(
                db, {"title": data.title}
            )
            if existing is not None:
                raise DuplicateError(f"Product already exists: {existing.title}")

            fields: dict = data.model_dump(exclude={"images"})
            if not fields.get("slug"):
                fields["slug"] = self._slug_for(data.title)
            if fields.get("price") is None:
                fields["price"] = 0

            product: Product = await product_repository.create(db, {**fields, "images": []})
            await product_repository.add_images(db, product, data.images)

            await db.commit()
            logger.info("Created product %s (%s)", product.id, product.slug)
        except (DuplicateError, BadRequestError):
            await db.rollback()
            raise
        except Exception as exc:
            await db.rollback()
            logger.exception("Failed to create product %r", data.title)
            raise InternalServerError(
                error_detail(exc, "An error occurred while creating the product")
            ) from exc

        return self._to_response(product)

    async def list_products(
        self,
        db: AsyncSession,
        page: int = 1,
        limit: int = 10,
    ) -> Page[ProductListItem]:
        """상품 목록을 페이지 단위로 조회합니다.

        List one page of products together with the total product count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            limit: 페이지당 항목 수 (Items per page)

        Returns:
            Page[ProductListItem]: 상품 목록 페이지 (Page of products)
        """
        try:
            products, total = await paginate(
                db, product_repository.list_query(), page=page, limit=limit
            )
        except Exception as exc:
            logger.exception("Failed to list products (page=%d, limit=%d)", page, limit)
            raise InternalServerError("Failed to retrieve products") from exc

        return Page[ProductListItem].build(
            [self._to_list_item(p) for p in products], total, page, limit
        )

    async def get_product(
        self,
        db: AsyncSession,
        query: str,
    ) -> ProductResponse:
        """ID 또는 슬러그로 상품을 조회합니다.

        UUID-shaped queries are looked up by id, anything else by slug.
        There is no fallback from one mode to the other.

        Raises:
            NotFoundError: 일치하는 상품이 없을 때 (No product matches)
            InternalServerError: 저장소 조회 실패 (Storage failure)
        """
        try:
            if is_valid_uuid(query):
                product: Product | None = await product_repository.get_detail(db, UUID(query))
            else:
                product = await product_repository.get_by_slug(db, query)
        except Exception as exc:
            logger.exception("Failed to retrieve product %r", query)
            raise InternalServerError("Failed to retrieve product") from exc

        if product is None:
            raise NotFoundError(f"Product with ID or slug {query} not found")
        return self._to_response(product)

    async def update_product(
        self,
        db: AsyncSession,
        product_id: UUID,
        data: ProductUpdate,
    ) -> ProductResponse:
        """상품 정보를 수정합니다.

        Apply a partial update to a product in a single transaction.

        Only fields present in the request are overwritten. A new title
        without an explicit slug re-derives the slug. A present ``images``
        list deletes every existing image row and inserts the new set.
        Unique violations on title or slug are not translated here and
        surface as ``InternalServerError``.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
            BadRequestError: 새 제목에서 슬러그를 만들 수 없을 때 (Title yields an empty slug)
            InternalServerError: 그 외 저장 실패 (Any other failure, rolled back)
        """
        try:
            product: Product | None = await product_repository.get_detail(db, product_id)
            if product is None:
                raise NotFoundError(f"Product with ID {product_id} not found")

            changes: dict = data.model_dump(exclude_unset=True, exclude={"images"})
            # 새 제목 또는 slug=null 이면 슬러그 재생성 (Re-derive slug from the effective title)
            if changes.get("slug") is None and ("title" in changes or "slug" in changes):
                changes["slug"] = self._slug_for(changes.get("title", product.title))

            await product_repository.apply_changes(db, product, changes)

            if data.images is not None:
                await product_repository.replace_images(db, product, data.images)

            await db.commit()
        except (NotFoundError, BadRequestError):
            await db.rollback()
            raise
        except Exception as exc:
            await db.rollback()
            logger.exception("Failed to update product %s", product_id)
            raise InternalServerError(
                error_detail(exc, "An error occurred while updating the product")
            ) from exc

        return self._to_response(product)

    async def delete_product(
        self,
        db: AsyncSession,
        product_id: UUID,
    ) -> None:
        """상품과 소속 이미지를 모두 삭제합니다.

        Delete a product and every image it owns in a single transaction.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Product not found)
            InternalServerError: 삭제 실패 (Deletion failed, rolled back)
        """
        try:
            product: Product | None = await product_repository.get_detail(db, product_id)
            if product is None:
                raise NotFoundError(f"Product with ID {product_id} not found")

            await product_repository.delete(db, product)
            await db.commit()
            logger.info("Deleted product %s", product_id)
        except NotFoundError:
            await db.rollback()
            raise
        except Exception as exc:
            await db.rollback()
            logger.exception("Failed to delete product %s", product_id)
            raise InternalServerError("Failed to delete the product") from exc


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
