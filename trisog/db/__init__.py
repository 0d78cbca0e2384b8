"""Database declarative base."""
