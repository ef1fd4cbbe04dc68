"""Create anime, advertisements and user_roles tables"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str | None = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Apply schema changes."""
    op.create_table(
        'anime',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=False),
        sa.Column('rating', sa.Numeric(precision=3, scale=1), server_default='0', nullable=False),
        sa.Column('genre', sa.String(length=255), nullable=False),
        sa.Column('release_year', sa.Integer(), nullable=False),
        sa.Column('episodes', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('rating >= 0 AND rating <= 10', name='ck_anime_rating_range'),
        sa.CheckConstraint('episodes >= 0', name='ck_anime_episodes_non_negative'),
        sa.CheckConstraint('release_year >= 1900', name='ck_anime_release_year_min'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_anime')),
    )
    op.create_index('ix_anime_title', 'anime', ['title'], unique=False)
    op.create_index('ix_anime_rating', 'anime', ['rating'], unique=False)
    op.create_index('ix_anime_created_at', 'anime', ['created_at'], unique=False)

    op.create_table(
        'advertisements',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=False),
        sa.Column('link_url', sa.Text(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_advertisements')),
    )
    op.create_index('ix_advertisements_is_active', 'advertisements', ['is_active'], unique=False)
    op.create_index('ix_advertisements_created_at', 'advertisements', ['created_at'], unique=False)

    # Provisioned out of band; the application only reads it
    op.create_table(
        'user_roles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_roles')),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_id_role'),
    )
    op.create_index('ix_user_roles_user_id', 'user_roles', ['user_id'], unique=False)


def downgrade() -> None:
    """Revert schema changes."""
    op.drop_index('ix_user_roles_user_id', table_name='user_roles')
    op.drop_table('user_roles')

    op.drop_index('ix_advertisements_created_at', table_name='advertisements')
    op.drop_index('ix_advertisements_is_active', table_name='advertisements')
    op.drop_table('advertisements')

    op.drop_index('ix_anime_created_at', table_name='anime')
    op.drop_index('ix_anime_rating', table_name='anime')
    op.drop_index('ix_anime_title', table_name='anime')
    op.drop_table('anime')
