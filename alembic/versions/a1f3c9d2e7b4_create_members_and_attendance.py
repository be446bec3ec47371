"""create_members_and_attendance

Revision ID: a1f3c9d2e7b4
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1f3c9d2e7b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'members',
        sa.Column('id', sa.Text(), primary_key=True),
        sa.Column('patient_name', sa.Text(), nullable=True),
        sa.Column('hospital_name', sa.Text(), nullable=True),
        sa.Column('major', sa.Text(), nullable=True),
        sa.Column('token', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_members_token', 'members', ['token'], unique=True)

    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Text(), nullable=True),
        sa.Column('patient_name', sa.Text(), nullable=True),
        sa.Column('hospital_name', sa.Text(), nullable=True),
        sa.Column('major', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('time', sa.String(length=40), nullable=False),
        sa.Column('forced', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_attendance_member_id', 'attendance', ['member_id'])

    # At most one scanned check-in per member; forced rows are exempt
    op.create_index(
        'uq_attendance_member_checkin',
        'attendance',
        ['member_id'],
        unique=True,
        sqlite_where=sa.text('forced = 0'),
        postgresql_where=sa.text('forced = false'),
    )


def downgrade():
    op.drop_index('uq_attendance_member_checkin', table_name='attendance')
    op.drop_index('ix_attendance_member_id', table_name='attendance')
    op.drop_table('attendance')
    op.drop_index('ix_members_token', table_name='members')
    op.drop_table('members')
