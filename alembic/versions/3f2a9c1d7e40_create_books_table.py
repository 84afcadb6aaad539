"""create_books_table

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column('isbn', sa.Text(), nullable=False, comment='International Standard Book Number'),
        sa.Column('amazon_url', sa.Text(), nullable=False, comment='Store page URL'),
        sa.Column('author', sa.Text(), nullable=False, comment='Author name'),
        sa.Column('language', sa.Text(), nullable=False, comment='Language of the book'),
        sa.Column('pages', sa.Integer(), nullable=False, comment='Number of pages in the book'),
        sa.Column('publisher', sa.Text(), nullable=False, comment='Publisher name'),
        sa.Column('title', sa.Text(), nullable=False, comment='Book title'),
        sa.Column('year', sa.Integer(), nullable=False, comment='Year of publication'),
        sa.PrimaryKeyConstraint('isbn')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
