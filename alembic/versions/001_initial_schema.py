"""Initial schema with recipes, ingredients, unit_of_measure, categories, notes

Revision ID: 001_initial_schema
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Reference data
    op.create_table(
        "unit_of_measure",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("description", sa.String(255), nullable=True),
    )

    # Notes table
    op.create_table(
        "notes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("recipe_notes", sa.Text, nullable=True),
    )

    # Recipes table
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("prep_time", sa.Integer, nullable=True),
        sa.Column("cook_time", sa.Integer, nullable=True),
        sa.Column("servings", sa.Integer, nullable=True),
        sa.Column("source", sa.String(255), nullable=True),
        sa.Column("url", sa.String(500), nullable=True),
        sa.Column("directions", sa.Text, nullable=True),
        sa.Column(
            "difficulty",
            sa.Enum("EASY", "MODERATE", "KIND_OF_HARD", "HARD", name="difficulty"),
            nullable=True,
        ),
        sa.Column("notes_id", sa.Integer, sa.ForeignKey("notes.id", ondelete="SET NULL"), nullable=True),
    )

    # Ingredients table
    op.create_table(
        "ingredients",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("recipe_id", sa.Integer, sa.ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("amount", sa.Numeric(10, 4), nullable=True),
        sa.Column("uom_id", sa.Integer, sa.ForeignKey("unit_of_measure.id"), nullable=True),
    )
    op.create_index("ix_ingredients_recipe_id", "ingredients", ["recipe_id"])

    # Recipe <-> category links
    op.create_table(
        "recipe_category",
        sa.Column("recipe_id", sa.Integer, sa.ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("recipe_category")
    op.drop_index("ix_ingredients_recipe_id", table_name="ingredients")
    op.drop_table("ingredients")
    op.drop_table("recipes")
    op.drop_table("notes")
    op.drop_table("categories")
    op.drop_table("unit_of_measure")
    sa.Enum(name="difficulty").drop(op.get_bind(), checkfirst=True)
