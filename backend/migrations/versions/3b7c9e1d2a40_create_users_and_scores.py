"""create users and scores tables

Revision ID: 3b7c9e1d2a40
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7c9e1d2a40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    existing_tables = set(sa.inspect(bind).get_table_names())

    # Tables created by `db.create_all()` on a dev database are left alone
    if 'users' not in existing_tables:
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('users') as batch_op:
            batch_op.create_index(batch_op.f('ix_users_username'), ['username'], unique=True)

    if 'scores' not in existing_tables:
        op.create_table(
            'scores',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=True),
            sa.Column('name', sa.String(length=64), nullable=False),
            sa.Column('score', sa.BigInteger(), nullable=False),
            sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id']),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('scores') as batch_op:
            batch_op.create_index(batch_op.f('ix_scores_score'), ['score'], unique=False)


def downgrade():
    with op.batch_alter_table('scores') as batch_op:
        batch_op.drop_index(batch_op.f('ix_scores_score'))
    op.drop_table('scores')
    with op.batch_alter_table('users') as batch_op:
        batch_op.drop_index(batch_op.f('ix_users_username'))
    op.drop_table('users')
