"""
Database module for Supabase integration.
Builds the client the repository adapters read sets and exercises through.
"""
import logging
from typing import Optional

from supabase import Client, create_client

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_supabase_client(settings: Optional[Settings] = None) -> Optional[Client]:
    """
    Get Supabase client instance.

    Args:
        settings: Optional settings; defaults to get_settings()

    Returns:
        Client, or None when credentials are not configured
    """
    settings = settings or get_settings()
    supabase_url = settings.supabase_url
    supabase_key = settings.supabase_key

    if not supabase_url or not supabase_key:
        logger.warning("Supabase credentials not configured. Insights will be unavailable.")
        return None

    return create_client(supabase_url, supabase_key)
