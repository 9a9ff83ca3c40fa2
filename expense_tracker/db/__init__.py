"""Database Declarations — SQLAlchemy declarative Base shared by models and Alembic.
"""
