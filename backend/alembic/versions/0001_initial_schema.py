"""initial schema: users, staff, bookings

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("USER", "ADMIN", name="userrole")
account_status = sa.Enum("ACTIVE", "INACTIVE", "SUSPENDED", "DELETED", name="accountstatus")
staff_role = sa.Enum("CLEANER", "SUPERVISOR", "DRIVER", name="staffrole")
materials = sa.Enum("WITH", "WITHOUT", name="materials")
booking_status = sa.Enum(
    "PENDING", "CONFIRMED", "IN_PROGRESS", "COMPLETED", "CANCELLED", name="bookingstatus"
)
payment_status = sa.Enum("UNPAID", "PAID", "REFUNDED", name="paymentstatus")
payment_method = sa.Enum("CASH", "CARD", "TRANSFER", name="paymentmethod")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(30)),
        sa.Column("role", user_role, nullable=False),
        sa.Column("status", account_status, nullable=False),
        sa.Column("email_verified", sa.Boolean(), nullable=False),
        sa.Column("email_verification_token", sa.String(64)),
        sa.Column("email_verification_expires", sa.DateTime()),
        sa.Column("password_reset_token", sa.String(64)),
        sa.Column("password_reset_expires", sa.DateTime()),
        sa.Column("created_at", sa.DateTime()),
        sa.Column("updated_at", sa.DateTime()),
        sa.Column("last_login_at", sa.DateTime()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_email_verification_token", "users", ["email_verification_token"])
    op.create_index("ix_users_password_reset_token", "users", ["password_reset_token"])

    op.create_table(
        "staff",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(30), nullable=False, unique=True),
        sa.Column("role", staff_role, nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime()),
        sa.Column("updated_at", sa.DateTime()),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL")),
        sa.Column("service", sa.String(100), nullable=False),
        sa.Column("hours", sa.Integer(), nullable=False),
        sa.Column("cleaners", sa.Integer(), nullable=False),
        sa.Column("materials", materials, nullable=False),
        sa.Column("date", sa.String(10), nullable=False),
        sa.Column("time", sa.String(10), nullable=False),
        sa.Column("area", sa.String(100), nullable=False),
        sa.Column("address_zone", sa.String(100)),
        sa.Column("address_building", sa.String(100)),
        sa.Column("address_street", sa.String(255)),
        sa.Column("client_name", sa.String(255), nullable=False),
        sa.Column("client_phone", sa.String(30), nullable=False),
        sa.Column("client_email", sa.String(255)),
        sa.Column("notes", sa.Text()),
        sa.Column("total_qar", sa.Float(), nullable=False),
        sa.Column("status", booking_status, nullable=False),
        sa.Column("payment_status", payment_status, nullable=False),
        sa.Column("payment_method", payment_method),
        sa.Column("payment_invoice_id", sa.String(100)),
        sa.Column("assigned_staff_ids", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime()),
        sa.Column("updated_at", sa.DateTime()),
    )
    op.create_index("ix_bookings_status_created", "bookings", ["status", "created_at"])
    op.create_index("ix_bookings_client_phone", "bookings", ["client_phone"])
    op.create_index("ix_bookings_date", "bookings", ["date"])


def downgrade() -> None:
    op.drop_table("bookings")
    op.drop_table("staff")
    op.drop_index("ix_users_password_reset_token", table_name="users")
    op.drop_index("ix_users_email_verification_token", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    bind = op.get_bind()
    for enum in (payment_method, payment_status, booking_status, materials, staff_role,
                 account_status, user_role):
        enum.drop(bind, checkfirst=True)
