"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client fixtures.
Every test gets a fresh schema built from the ORM metadata.
"""

import os

# 앱 임포트 전에 설정 — Must be set before catalog.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_S3_BUCKET"] = ""
os.environ["AXIOM_API_TOKEN"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from catalog.database import Base, get_db  # noqa: E402
from catalog.main import app  # noqa: E402
from catalog.models import *  # noqa: F401,F403,E402 — register all models with metadata
from catalog.models.product import Product, ProductImage  # noqa: E402

URL = "/api/v1/products"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 단일 커넥션을 공유하는 인메모리 DB."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
def product_payload(title: str = "Red Hoodie", **overrides) -> dict:
    """상품 생성 요청 본문을 만듭니다."""
    payload = {
        "title": title,
        "in_stock": 5,
        "sizes": ["S", "M"],
        "gender": "unisex",
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def product(db: AsyncSession) -> Product:
    """이미지 2개가 달린 테스트 상품을 생성합니다."""
    p = Product(
        title="Test Shirt",
        slug="test-shirt",
        price=19.99,
        in_stock=3,
        sizes=["M", "L"],
        gender="men",
        tags=["shirt"],
        images=[
            ProductImage(url="front.png", sort_order=0),
            ProductImage(url="back.png", sort_order=1),
        ],
    )
    db.add(p)
    await db.commit()
    return p
