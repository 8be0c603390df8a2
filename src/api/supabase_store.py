"""
Supabase Draft Store for ScopeGen

Persists saved proposal drafts to the Supabase `proposals` table.
Every operation returns None when the client isn't configured or the
request fails, so callers can fall back to the file store.
"""

import os
import logging
from datetime import datetime
from typing import Optional, Dict, Any
from supabase import create_client, Client

logger = logging.getLogger(__name__)

# Supabase configuration
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")

PROPOSALS_TABLE = "proposals"

# Initialize Supabase client (will be None if no service key)
supabase: Optional[Client] = None


def get_supabase_client() -> Optional[Client]:
    """Get or create Supabase client."""
    global supabase
    if supabase is None and SUPABASE_URL and SUPABASE_SERVICE_KEY:
        supabase = create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    return supabase


class SupabaseDraftStore:
    """Draft store backed by Supabase database."""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()
        if not self.client:
            logger.warning("Supabase client not initialized, drafts use the file store")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def save_draft(self, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Insert a flattened draft record."""
        if not self.client:
            return None
        try:
            data = dict(record)
            data["updated_at"] = datetime.now().isoformat()
            result = self.client.table(PROPOSALS_TABLE).insert(data).execute()
            return result.data[0] if result.data else None
        except Exception as e:
            logger.warning("Error saving draft: %s", e)
            return None

    def get_draft(self, draft_id: str) -> Optional[Dict[str, Any]]:
        """Get a draft by ID."""
        if not self.client:
            return None
        try:
            result = (
                self.client.table(PROPOSALS_TABLE)
                .select("*")
                .eq("id", draft_id)
                .eq("status", "draft")
                .execute()
            )
            return result.data[0] if result.data else None
        except Exception as e:
            logger.warning("Error getting draft: %s", e)
            return None


# Global instance
supabase_store = SupabaseDraftStore()
