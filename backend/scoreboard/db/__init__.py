"""Database Layer — declarative base shared by models, migrations and tests.

Invariants:
    - Single metadata object for the three record tables
"""
