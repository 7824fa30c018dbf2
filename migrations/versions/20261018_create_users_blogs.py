"""Create users and blogs tables

Revision ID: 20261018_create_users_blogs
Revises: 
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261018_create_users_blogs'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=80), nullable=False, unique=True),
        sa.Column('email', sa.String(length=120), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=128), nullable=False),
        sa.Column('role', sa.Enum('reader', 'author', 'admin', name='user_role', native_enum=False), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'blogs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('subtitle', sa.String(length=255), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False, unique=True),
        sa.Column('image', sa.String(length=500), nullable=True),
        sa.Column('status', sa.Enum('draft', 'published', name='blog_status', native_enum=False), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_blogs_status', 'blogs', ['status'])
    op.create_index('ix_blogs_author_id', 'blogs', ['author_id'])
    op.create_index('ix_blogs_created_at', 'blogs', ['created_at'])


def downgrade():
    op.drop_index('ix_blogs_created_at', table_name='blogs')
    op.drop_index('ix_blogs_author_id', table_name='blogs')
    op.drop_index('ix_blogs_status', table_name='blogs')
    op.drop_table('blogs')
    op.drop_table('users')
