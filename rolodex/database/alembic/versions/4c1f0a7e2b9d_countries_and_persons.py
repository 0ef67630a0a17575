"""countries and persons

Revision ID: 4c1f0a7e2b9d
Revises:
Create Date: 2026-10-19 10:12:41.228163

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from rolodex.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4c1f0a7e2b9d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema

gender_option = sa.Enum('Male', 'Female', 'Other', name='gender_option', length=10)


def _meta_type():
    return sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')


def _service_object_columns():
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', _meta_type(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'countries',
        *_service_object_columns(),
        sa.Column('country_name', sa.String(length=40), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_countries')),
        sa.UniqueConstraint('country_name', name='uq_countries_country_name'),
        schema=SCHEMA,
    )
    op.create_table(
        'persons',
        *_service_object_columns(),
        sa.Column('person_name', sa.String(length=40), nullable=True),
        sa.Column('email', sa.String(length=50), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('gender', gender_option, nullable=True),
        sa.Column('country_id', sa.Uuid(), nullable=True),
        sa.Column('address', sa.String(length=200), nullable=True),
        sa.Column('receive_news_letters', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.ForeignKeyConstraint(
            ['country_id'],
            [f'{SCHEMA}.countries.id' if SCHEMA else 'countries.id'],
            name=op.f('fk_persons_country_id_countries'),
            ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_persons')),
        schema=SCHEMA,
    )
    op.create_index('ix_persons_person_name', 'persons', ['person_name'], unique=False, schema=SCHEMA)
    op.create_index('ix_persons_country_id', 'persons', ['country_id'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_persons_country_id', table_name='persons', schema=SCHEMA)
    op.drop_index('ix_persons_person_name', table_name='persons', schema=SCHEMA)
    op.drop_table('persons', schema=SCHEMA)
    op.drop_table('countries', schema=SCHEMA)
    gender_option.drop(op.get_bind(), checkfirst=True)
