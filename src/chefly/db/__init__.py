"""Chefly - Database access (Supabase)."""

from chefly.db.client import get_client

__all__ = ["get_client"]
