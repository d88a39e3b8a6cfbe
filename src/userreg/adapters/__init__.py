"""Adapters implementing the userreg ports."""
