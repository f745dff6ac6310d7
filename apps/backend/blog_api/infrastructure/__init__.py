"""Infraestructura: pool PostgreSQL y repositorios (Postgres / in-memory)."""
