"""Contract tests.

The UserDao port is checked once and run against the in-memory adapter and
the SQLAlchemy adapter on in-memory and migrated file-backed SQLite.
"""
