"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_foundation (Alembic Migration)

Responsibilities:
  - Crear el esquema completo desde cero (migración fundacional).
  - Definir tablas users / documents / replies con constraints e índices.
  - Preparar la columna `search_vector` (tsvector) + índice GIN para búsqueda.

Collaborators:
  - PostgreSQL 16+
  - Alembic (framework de migraciones)
  - Repositorios Postgres (usan este esquema como contrato)

Policy:
  - Migración BASELINE: evoluciones futuras con migraciones aditivas (002+).
  - Convención de nombres (constraints / indexes):
      pk_<tabla>                         - Primary keys
      uq_<tabla>_<col>                   - Unique constraints
      ix_<tabla>_<col>                   - Indexes
      fk_<tabla>_<col>__<ref_tabla>      - Foreign keys
  - `search_vector` lo escribe la capa de repositorio (title + content + tags).
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# ============================================================
# Alembic identifiers
# ============================================================
revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# ============================================================
# Constants
# ============================================================
_SEARCH_GIN_INDEX = "ix_documents_search_vector"


def upgrade() -> None:
    """
    Crea el esquema fundacional.

    Orden por dependencias:
      1) Identity (users)
      2) Documents
      3) Replies
    """

    # =========================================================
    # 1) IDENTITY (users)
    # =========================================================
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "role",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'Reader'"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "role IN ('Reader','Writer','Admin')",
            name="ck_users_role",
        ),
    )

    # Lookup case-insensitive por email (login).
    op.execute("CREATE UNIQUE INDEX ix_users_lower_email ON users (lower(email))")

    # =========================================================
    # 2) DOCUMENTS
    # =========================================================
    op.create_table(
        "documents",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'draft'"),
        ),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default=sa.text("ARRAY[]::varchar[]"),
        ),
        sa.Column("search_vector", postgresql.TSVECTOR, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_documents"),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name="fk_documents_owner_id__users",
            ondelete="CASCADE",
        ),
        sa.CheckConstraint(
            "status IN ('draft','published')",
            name="ck_documents_status",
        ),
    )

    # Filtros del predicado de visibilidad.
    op.create_index("ix_documents_status", "documents", ["status"])
    op.create_index("ix_documents_owner_id", "documents", ["owner_id"])
    # ORDER BY created_at DESC en listados.
    op.create_index("ix_documents_created_at", "documents", ["created_at"])
    # Full-text: operador @@ sobre tsvector.
    op.execute(
        f"CREATE INDEX {_SEARCH_GIN_INDEX} ON documents USING gin (search_vector)"
    )

    # =========================================================
    # 3) REPLIES
    # =========================================================
    op.create_table(
        "replies",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("document_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_replies"),
        # Borrar un documento borra sus respuestas.
        sa.ForeignKeyConstraint(
            ["document_id"],
            ["documents.id"],
            name="fk_replies_document_id__documents",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name="fk_replies_owner_id__users",
            ondelete="CASCADE",
        ),
    )

    op.create_index("ix_replies_document_id", "replies", ["document_id"])
    op.create_index("ix_replies_owner_id", "replies", ["owner_id"])


def downgrade() -> None:
    """Elimina el esquema en orden inverso de dependencias."""
    op.drop_table("replies")
    op.execute(f"DROP INDEX IF EXISTS {_SEARCH_GIN_INDEX}")
    op.drop_table("documents")
    op.execute("DROP INDEX IF EXISTS ix_users_lower_email")
    op.drop_table("users")
