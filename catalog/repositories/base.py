"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for domain repositories.
Provides generic lookup, insert and delete operations. Repositories only
flush; committing or rolling back is the calling service's job.

Usage:
    class ProductRepository(BaseRepository[Product]):
        def __init__(self) -> None:
            super().__init__(Product)
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_one_by(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> ModelType | None:
        """컬럼 값 조건으로 단일 레코드를 조회합니다.

        Retrieve a single record matching all ``{column: value}`` filters.
        """
        query: Select = select(self.model)
        for column_name, value in filters.items():
            query = query.where(getattr(self.model, column_name) == value)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다 (flush만 수행).

        Create a new record and flush it so generated ids are available.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """레코드를 삭제합니다 (관계 cascade 적용).

        Delete an already-loaded record; ORM cascades apply.
        """
        await db.delete(db_obj)
        await db.flush()

