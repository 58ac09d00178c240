"""Rust + sqlx CRUD layer generator for PostgreSQL tables."""

__version__ = "0.1.0"
