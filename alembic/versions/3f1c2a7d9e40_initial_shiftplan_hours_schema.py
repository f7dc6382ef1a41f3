"""Initial shiftplan hours schema

Revision ID: 3f1c2a7d9e40
Revises:
Create Date: 2026-10-19 09:12:31.418207

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9e40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(length=36), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )
    op.create_table(
        "permissions",
        sa.Column("code", sa.String(length=100), nullable=False),
        sa.Column("module", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("code"),
    )
    op.create_table(
        "roles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("is_system", sa.Boolean(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "role_permissions",
        sa.Column("role_id", sa.Uuid(), nullable=False),
        sa.Column("permission_code", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["permission_code"], ["permissions.code"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("role_id", "permission_code"),
    )
    op.create_table(
        "user_roles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("role_id", sa.Uuid(), nullable=False),
        sa.Column("assigned_by_id", sa.Uuid(), nullable=True),
        sa.Column("assigned_at", sa.DateTime(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assigned_by_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "role_id", name="_user_role_uc"),
    )
    op.create_table(
        "sales_persons",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("background_color", sa.String(length=7), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=True),
        sa.Column("inactive", sa.Boolean(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        sa.Column("version", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_table(
        "employee_work_details",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("expected_hours", sa.Float(), nullable=False),
        sa.Column("workdays_per_week", sa.Integer(), nullable=False),
        sa.Column("from_year", sa.Integer(), nullable=False),
        sa.Column("from_calendar_week", sa.Integer(), nullable=False),
        sa.Column("from_day_of_week", sa.Integer(), nullable=False),
        sa.Column("to_year", sa.Integer(), nullable=False),
        sa.Column("to_calendar_week", sa.Integer(), nullable=False),
        sa.Column("to_day_of_week", sa.Integer(), nullable=False),
        sa.Column("monday", sa.Boolean(), nullable=False),
        sa.Column("tuesday", sa.Boolean(), nullable=False),
        sa.Column("wednesday", sa.Boolean(), nullable=False),
        sa.Column("thursday", sa.Boolean(), nullable=False),
        sa.Column("friday", sa.Boolean(), nullable=False),
        sa.Column("saturday", sa.Boolean(), nullable=False),
        sa.Column("sunday", sa.Boolean(), nullable=False),
        sa.Column("vacation_days", sa.Integer(), nullable=False),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        sa.Column("version", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["sales_person_id"], ["sales_persons.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_employee_work_details_sales_person_id"),
        "employee_work_details",
        ["sales_person_id"],
        unique=False,
    )
    op.create_table(
        "slots",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("time_from", sa.Time(), nullable=False),
        sa.Column("time_to", sa.Time(), nullable=False),
        sa.Column("valid_from", sa.Date(), nullable=False),
        sa.Column("valid_to", sa.Date(), nullable=True),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("slot_id", sa.Uuid(), nullable=False),
        sa.Column("calendar_week", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["sales_person_id"], ["sales_persons.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["slot_id"], ["slots.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "sales_person_id",
            "slot_id",
            "calendar_week",
            "year",
            "deleted",
            name="_booking_sales_person_slot_week_uc",
        ),
    )
    op.create_index(
        op.f("ix_bookings_sales_person_id"),
        "bookings",
        ["sales_person_id"],
        unique=False,
    )
    op.create_table(
        "custom_extra_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("modifies_balance", sa.Boolean(), nullable=False),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "extra_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column(
            "category",
            sa.Enum(
                "EXTRA_WORK",
                "VACATION",
                "SICK_LEAVE",
                "HOLIDAY",
                "UNAVAILABLE",
                "CUSTOM",
                name="extrahourscategory",
            ),
            nullable=False,
        ),
        sa.Column("custom_extra_hours_id", sa.Uuid(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        sa.Column("version", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["sales_person_id"], ["sales_persons.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["custom_extra_hours_id"], ["custom_extra_hours.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_extra_hours_sales_person_id"),
        "extra_hours",
        ["sales_person_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_extra_hours_date_time"), "extra_hours", ["date_time"], unique=False
    )
    op.create_table(
        "employee_yearly_carryovers",
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("carryover_hours", sa.Float(), nullable=False),
        sa.Column("vacation", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["sales_person_id"], ["sales_persons.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("sales_person_id", "year"),
    )
    op.create_table(
        "billing_periods",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("created_by", sa.String(length=100), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("deleted_by", sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_billing_periods_end_date"),
        "billing_periods",
        ["end_date"],
        unique=False,
    )
    op.create_table(
        "billing_period_sales_persons",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("billing_period_id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("value_type", sa.String(length=255), nullable=False),
        sa.Column("value_delta", sa.Float(), nullable=False),
        sa.Column("value_ytd_from", sa.Float(), nullable=False),
        sa.Column("value_ytd_to", sa.Float(), nullable=False),
        sa.Column("value_full_year", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("created_by", sa.String(length=100), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("deleted_by", sa.String(length=100), nullable=True),
        sa.ForeignKeyConstraint(
            ["billing_period_id"], ["billing_periods.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["sales_person_id"], ["sales_persons.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "billing_period_id",
            "sales_person_id",
            "value_type",
            name="_billing_period_sales_person_value_uc",
        ),
    )
    op.create_index(
        op.f("ix_billing_period_sales_persons_billing_period_id"),
        "billing_period_sales_persons",
        ["billing_period_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_table("billing_period_sales_persons")
    op.drop_table("billing_periods")
    op.drop_table("employee_yearly_carryovers")
    op.drop_table("extra_hours")
    op.drop_table("custom_extra_hours")
    op.drop_table("bookings")
    op.drop_table("slots")
    op.drop_table("employee_work_details")
    op.drop_table("sales_persons")
    op.drop_table("user_roles")
    op.drop_table("role_permissions")
    op.drop_table("roles")
    op.drop_table("permissions")
    op.drop_table("sessions")
    op.drop_table("users")
    # Drop the enum type if using PostgreSQL
    op.execute("DROP TYPE IF EXISTS extrahourscategory")
