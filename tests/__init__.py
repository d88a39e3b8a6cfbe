"""userreg test suite.

Folder taxonomy
- unit/         : Fast checks of one module/class; the UserDao is a mock.
- contract/     : UserDao behavior run against every adapter.
- integration/  : Alembic migrations, bootstrap wiring and real SQLite stores.
- fixtures/     : Shared fixtures registered via `pytest_plugins` (no tests here).

Markers
- unit, contract, integration are added from the folder a test lives in.
- user, login, fast, slow tag registry behavior; property tags hypothesis tests.
"""
