"""Shared SQLAlchemy `MetaData` for the userreg tables.

The only constraint the schema declares is the ``users`` primary key. It is
named ``pk_<table>`` both here and in the migrations, so reflected and
declared schemas compare equal.
"""

from sqlalchemy import MetaData

#: Metadata every userreg table attaches to.
metadata = MetaData(naming_convention={"pk": "pk_%(table_name)s"})
