"""create schedule tasks

Revision ID: 4a8c2e91d7b3
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "4a8c2e91d7b3"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "schedule_tasks",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column(
            "schedule_type",
            sa.Enum("PROJECT", "SUPERVISION", name="scheduletype"),
            nullable=False,
        ),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column(
            "status",
            sa.Enum(
                "NOT_STARTED",
                "STARTED",
                "IN_PROGRESS",
                "PAUSED",
                "DONE",
                name="scheduletaskstatus",
            ),
            nullable=False,
        ),
        sa.Column(
            "priority",
            sa.Enum("LOW", "MEDIUM", "HIGH", "URGENT", name="scheduletaskpriority"),
            nullable=True,
        ),
        sa.Column("justification", sa.String(), nullable=True),
        sa.Column("assigned_to", sa.String(), nullable=True),
        sa.Column("progress", sa.Integer(), nullable=True),
        sa.Column("dependencies", sa.JSON(), nullable=False),
        sa.Column("observations", sa.String(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_schedule_tasks_type", "schedule_tasks", ["schedule_type"])


def downgrade() -> None:
    op.drop_index("idx_schedule_tasks_type", table_name="schedule_tasks")
    op.drop_table("schedule_tasks")
