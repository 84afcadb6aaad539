"""
Services Package

Business logic that route handlers delegate to. Services work on a
SQLAlchemy session passed in by the caller and never build their own.
"""
