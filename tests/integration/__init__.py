"""Integration tests.

Migrations, bootstrap wiring and SQLAlchemy store behavior against real
file-backed SQLite databases.
"""
