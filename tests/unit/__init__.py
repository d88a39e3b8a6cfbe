"""Unit tests.

The UserService collaborator is replaced with an autospecced mock; SQLite is
only touched by the engine/schema helpers.
"""
