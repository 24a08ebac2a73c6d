"""Initial schema

Revision ID: b3e1c6a0d2f4
Revises:
Create Date: 2026-10-18

Tables Created:
- users: credentials, lockout counters and profile
- roles: named roles with an active/inactive state
- role_assignments: grant/revoke history of roles to users

At most one active assignment per (user, role) is enforced by a partial
unique index. The default roles are seeded here; the application bootstrap
adds any further configured roles at startup.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = 'b3e1c6a0d2f4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

entity_state = postgresql.ENUM('active', 'inactive', name='entity_state', create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    # =========================================================================
    # STEP 1: Enum types
    # =========================================================================
    postgresql.ENUM('active', 'inactive', name='entity_state').create(op.get_bind(), checkfirst=True)

    # =========================================================================
    # STEP 2: Base tables
    # =========================================================================

    # users table
    op.create_table(
        'users',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('TRUE')),
        sa.Column('email_verified', sa.Boolean(), nullable=False, server_default=sa.text('FALSE')),
        sa.Column('failed_login_attempts', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('locked_until', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('national_id', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('email', name=op.f('uq_users_email')),
        sa.UniqueConstraint('national_id', name=op.f('uq_users_national_id')),
    )

    # roles table
    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), sa.Identity(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('state', entity_state, nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_roles')),
        sa.UniqueConstraint('name', name=op.f('uq_roles_name')),
    )

    # =========================================================================
    # STEP 3: Dependent tables
    # =========================================================================

    # role_assignments table
    op.create_table(
        'role_assignments',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('user_id', sa.BigInteger(), nullable=False),
        sa.Column('role_id', sa.Integer(), nullable=False),
        sa.Column('state', entity_state, nullable=False, server_default='active'),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('revoked_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name=op.f('fk_role_assignments_user_id_users'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id'], name=op.f('fk_role_assignments_role_id_roles'), ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_role_assignments')),
    )
    op.create_index(op.f('ix_role_assignments_user_id'), 'role_assignments', ['user_id'], unique=False)
    op.create_index('ix_role_assignments_role_id_state', 'role_assignments', ['role_id', 'state'], unique=False)

    # Only one active row per (user, role); revoked rows are kept as history
    op.create_index(
        'uq_role_assignments_active_user_role',
        'role_assignments',
        ['user_id', 'role_id'],
        unique=True,
        postgresql_where=sa.text("state = 'active'"),
    )

    # =========================================================================
    # STEP 4: Seed default roles
    # =========================================================================
    roles_table = sa.table(
        'roles',
        sa.column('name', sa.String),
        sa.column('description', sa.Text),
    )
    op.bulk_insert(
        roles_table,
        [
            {'name': 'superadmin', 'description': 'Full access, including role management'},
            {'name': 'admin', 'description': 'Grants and revokes roles'},
            {'name': 'usuario', 'description': 'Default role of registered users'},
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('uq_role_assignments_active_user_role', table_name='role_assignments')
    op.drop_index('ix_role_assignments_role_id_state', table_name='role_assignments')
    op.drop_index(op.f('ix_role_assignments_user_id'), table_name='role_assignments')
    op.drop_table('role_assignments')
    op.drop_table('roles')
    op.drop_table('users')
    postgresql.ENUM(name='entity_state').drop(op.get_bind(), checkfirst=True)
