"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "drones",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("serial", sa.String(length=100), nullable=False),
        sa.Column("brand", sa.String(length=255), nullable=False),
        sa.Column("manufacturer", sa.String(length=255), nullable=False),
        sa.Column("country", sa.String(length=255), nullable=False),
        sa.Column("model", sa.String(length=255), nullable=True),
        sa.Column(
            "status",
            sa.Enum("active", "inactive", "maintenance", name="dronestatus"),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_drones_id"), "drones", ["id"], unique=False)
    op.create_index(op.f("ix_drones_serial"), "drones", ["serial"], unique=True)

    op.create_table(
        "ducks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("drone_serial", sa.String(length=100), nullable=False),
        sa.Column("drone_brand", sa.String(length=255), nullable=False),
        sa.Column("drone_manufacturer", sa.String(length=255), nullable=False),
        sa.Column("drone_country", sa.String(length=255), nullable=False),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("location_city", sa.String(length=255), nullable=False),
        sa.Column("location_country", sa.String(length=255), nullable=False),
        sa.Column("gps_lat", sa.Float(), nullable=False),
        sa.Column("gps_lon", sa.Float(), nullable=False),
        sa.Column("precision", sa.Float(), nullable=True),
        sa.Column("reference_point", sa.String(length=255), nullable=True),
        sa.Column(
            "status",
            sa.Enum("awake", "trance", "deep-hibernation", name="hibernationstatus"),
            nullable=False,
        ),
        sa.Column("heart_rate", sa.Integer(), nullable=True),
        sa.Column("mutations", sa.Integer(), nullable=False),
        sa.Column("superpower_name", sa.String(length=255), nullable=True),
        sa.Column("superpower_description", sa.Text(), nullable=True),
        sa.Column("superpower_type", sa.String(length=100), nullable=True),
        sa.Column(
            "superpower_rarity",
            sa.Enum("common", "uncommon", "rare", "epic", "legendary", name="superpowerrarity"),
            nullable=True,
        ),
        sa.Column("superpower_risk", sa.Integer(), nullable=True),
        sa.Column("is_captured", sa.Boolean(), nullable=False),
        sa.Column("captured_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("registered_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ducks_id"), "ducks", ["id"], unique=False)
    op.create_index(op.f("ix_ducks_drone_serial"), "ducks", ["drone_serial"], unique=False)
    op.create_index(op.f("ix_ducks_is_captured"), "ducks", ["is_captured"], unique=False)
    op.create_index(op.f("ix_ducks_registered_at"), "ducks", ["registered_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_ducks_registered_at"), table_name="ducks")
    op.drop_index(op.f("ix_ducks_is_captured"), table_name="ducks")
    op.drop_index(op.f("ix_ducks_drone_serial"), table_name="ducks")
    op.drop_index(op.f("ix_ducks_id"), table_name="ducks")
    op.drop_table("ducks")

    op.drop_index(op.f("ix_drones_serial"), table_name="drones")
    op.drop_index(op.f("ix_drones_id"), table_name="drones")
    op.drop_table("drones")

    op.execute("DROP TYPE IF EXISTS hibernationstatus")
    op.execute("DROP TYPE IF EXISTS superpowerrarity")
    op.execute("DROP TYPE IF EXISTS dronestatus")
