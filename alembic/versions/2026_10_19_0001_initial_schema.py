"""Initial schema with catalog and page content tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Catalog
    op.create_table(
        'categories',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sqlmodel.AutoString(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_categories_name', 'categories', ['name'], unique=True)

    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('category_id', sa.Uuid(), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('title', sqlmodel.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.AutoString(length=500), nullable=False),
        sa.Column('main_image_url', sqlmodel.AutoString(length=1000), nullable=False),
        sa.Column('gallery_image_urls', sa.JSON(), nullable=False),
        sa.Column('badge_text', sqlmodel.AutoString(length=50), nullable=True),
        sa.Column('badge_color', sqlmodel.AutoString(length=20), nullable=True),
        sa.Column('badge_icon', sqlmodel.AutoString(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_products_category_id', 'products', ['category_id'])
    op.create_index('ix_products_created_at', 'products', ['created_at'])

    op.create_table(
        'menu_items',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('product_id', sa.Uuid(), sa.ForeignKey('products.id'), nullable=True),
        sa.Column('category_id', sa.Uuid(), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('name', sqlmodel.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.AutoString(length=300), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_menu_items_product_id', 'menu_items', ['product_id'])
    op.create_index('ix_menu_items_category_id', 'menu_items', ['category_id'])

    # Page content
    op.create_table(
        'faqs',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('question', sqlmodel.AutoString(length=200), nullable=False),
        sa.Column('answer', sqlmodel.AutoString(length=1000), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_faqs_created_at', 'faqs', ['created_at'])

    op.create_table(
        'image_messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('image_url', sqlmodel.AutoString(length=1000), nullable=False),
        sa.Column('message', sqlmodel.AutoString(length=500), nullable=False),
        sa.Column('icon', sqlmodel.AutoString(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_image_messages_created_at', 'image_messages', ['created_at'])

    op.create_table(
        'misc_content',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('section', sqlmodel.AutoString(length=50), nullable=False),
        sa.Column('image_url', sqlmodel.AutoString(length=1000), nullable=True),
        sa.Column('icon', sqlmodel.AutoString(length=50), nullable=True),
        sa.Column('large_text', sqlmodel.AutoString(length=255), nullable=True),
        sa.Column('small_text', sqlmodel.AutoString(length=255), nullable=True),
        sa.Column('message', sqlmodel.AutoString(length=2000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_misc_content_section', 'misc_content', ['section'])
    op.create_index('ix_misc_content_created_at', 'misc_content', ['created_at'])


def downgrade():
    op.drop_index('ix_misc_content_created_at', 'misc_content')
    op.drop_index('ix_misc_content_section', 'misc_content')
    op.drop_table('misc_content')

    op.drop_index('ix_image_messages_created_at', 'image_messages')
    op.drop_table('image_messages')

    op.drop_index('ix_faqs_created_at', 'faqs')
    op.drop_table('faqs')

    op.drop_index('ix_menu_items_category_id', 'menu_items')
    op.drop_index('ix_menu_items_product_id', 'menu_items')
    op.drop_table('menu_items')

    op.drop_index('ix_products_created_at', 'products')
    op.drop_index('ix_products_category_id', 'products')
    op.drop_table('products')

    op.drop_index('ix_categories_name', 'categories')
    op.drop_table('categories')
