"""Alembic migration scripts for the userreg schema."""
