"""create_products

Revision ID: a7c3e9d1f2b4
Revises:
Create Date: 2026-10-19 10:00:00.000000

상품 카탈로그 테이블 생성: products, product_images.
Create product catalog tables: products, product_images.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID


# revision identifiers, used by Alembic.
revision: str = 'a7c3e9d1f2b4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # products — 상품 (title, slug 고유)
    # Catalog products, unique by title and by slug
    op.create_table(
        'products',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False, unique=True),
        sa.Column('slug', sa.Text(), nullable=False, unique=True),
        sa.Column('price', sa.Float(), server_default=sa.text('0'), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('in_stock', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('sizes', JSONB(), nullable=False),
        sa.Column('gender', sa.String(50), nullable=False),
        sa.Column('tags', JSONB(), server_default=sa.text("'[]'"), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # product_images — 상품 이미지 (상품 삭제 시 함께 삭제)
    # Images owned by a product, removed together with it
    op.create_table(
        'product_images',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('product_id', UUID(as_uuid=True), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('sort_order', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # 이미지 인덱스 — Image lookup by product
    op.create_index('ix_product_images_product_id', 'product_images', ['product_id'])


def downgrade() -> None:
    # product_images 테이블 삭제 (인덱스는 테이블과 함께 삭제됨)
    # Drop product_images first (FK to products)
    op.drop_table('product_images')
    op.drop_table('products')
