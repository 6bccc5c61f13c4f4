"""Database Metadata — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - db/ holds metadata only; engines and sessions live in infrastructure/database.py
"""
