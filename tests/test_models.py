"""모델 스키마 기본값 테스트.

Column defaults declared on the models must also exist in the database,
so rows inserted outside the ORM get the same values.
"""

import uuid

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


async def test_server_defaults_for_omitted_columns(db: AsyncSession):
    product_id = uuid.uuid4()
    await db.execute(
        text(
            "INSERT INTO products (id, title, slug, sizes, gender) "
            "VALUES (:id, 'Raw', 'raw', '[\"M\"]', 'unisex')"
        ),
        {"id": product_id.hex},
    )
    await db.execute(
        text("INSERT INTO product_images (id, product_id, url) VALUES (:id, :product_id, 'a.png')"),
        {"id": uuid.uuid4().hex, "product_id": product_id.hex},
    )

    row = (await db.execute(
        text("SELECT price, in_stock, tags, created_at, updated_at FROM products")
    )).one()
    assert row.price == 0
    assert row.in_stock == 0
    assert row.tags == "[]"
    assert row.created_at is not None
    assert row.updated_at is not None

    image = (await db.execute(text("SELECT sort_order, created_at FROM product_images"))).one()
    assert image.sort_order == 0
    assert image.created_at is not None
