"""Supabase client singleton.

``get_supabase()`` returns a lazily-initialized, process-wide client for the
career map tables, built from ``settings``.  ``reset_supabase()`` drops it so
the next call reconnects (used after settings change and in tests).
"""

from supabase import Client, create_client

from app.core.config import settings

_client: Client | None = None


def get_supabase() -> Client:
    """Return the singleton Supabase client, creating it on first call."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


def reset_supabase() -> None:
    """Forget the cached client."""
    global _client
    _client = None
