"""initial schema: iam, profiles, academics, enrollment, finance

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-18 09:12:41.207113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('role_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role_id', 'users', ['role_id'])

    op.create_table(
        'user_profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('middle_name', sa.String(length=100), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )

    op.create_table(
        'academic_classes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('uuid', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_academic_classes_uuid', 'academic_classes', ['uuid'], unique=True)

    op.create_table(
        'sections',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('uuid', sa.Uuid(), nullable=False),
        sa.Column('section_name', sa.String(length=50), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['class_id'], ['academic_classes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('uuid'),
        sa.UniqueConstraint('class_id', 'section_name', name='uq_sections_class_section'),
    )
    op.create_index('ix_sections_class_id', 'sections', ['class_id'])

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('enrollment_number', sa.String(length=50), nullable=False),
        sa.Column('enrollment_date', sa.Date(), nullable=False),
        sa.Column('roll_no', sa.Integer(), nullable=False),
        sa.Column('section_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['section_id'], ['sections.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_students_enrollment_number', 'students', ['enrollment_number'], unique=True)
    op.create_index('ix_students_section_id', 'students', ['section_id'])

    op.create_table(
        'staff',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.String(length=50), nullable=False),
        sa.Column('joining_date', sa.Date(), nullable=False),
        sa.Column('job_title', sa.String(length=100), nullable=False),
        sa.Column('department', sa.String(length=30), nullable=False),
        sa.Column('staff_type', sa.String(length=30), nullable=False),
        sa.Column('office_location', sa.String(length=100), nullable=True),
        sa.Column('qualification', sa.String(length=255), nullable=True),
        sa.Column('years_of_experience', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_staff_employee_id', 'staff', ['employee_id'], unique=True)

    op.create_table(
        'fee_types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'fee_structures',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('academic_year', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_fee_structures_academic_year', 'fee_structures', ['academic_year'])

    op.create_table(
        'fee_particulars',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=False),
        sa.Column('fee_type_id', sa.Integer(), nullable=False),
        sa.Column('fee_structure_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['fee_type_id'], ['fee_types.id']),
        sa.ForeignKeyConstraint(['fee_structure_id'], ['fee_structures.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_fee_particulars_fee_type_id', 'fee_particulars', ['fee_type_id'])
    op.create_index('ix_fee_particulars_fee_structure_id', 'fee_particulars', ['fee_structure_id'])


def downgrade() -> None:
    op.drop_index('ix_fee_particulars_fee_structure_id', table_name='fee_particulars')
    op.drop_index('ix_fee_particulars_fee_type_id', table_name='fee_particulars')
    op.drop_table('fee_particulars')
    op.drop_index('ix_fee_structures_academic_year', table_name='fee_structures')
    op.drop_table('fee_structures')
    op.drop_table('fee_types')
    op.drop_index('ix_staff_employee_id', table_name='staff')
    op.drop_table('staff')
    op.drop_index('ix_students_section_id', table_name='students')
    op.drop_index('ix_students_enrollment_number', table_name='students')
    op.drop_table('students')
    op.drop_index('ix_sections_class_id', table_name='sections')
    op.drop_table('sections')
    op.drop_index('ix_academic_classes_uuid', table_name='academic_classes')
    op.drop_table('academic_classes')
    op.drop_table('user_profiles')
    op.drop_index('ix_users_role_id', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
    op.drop_table('roles')
