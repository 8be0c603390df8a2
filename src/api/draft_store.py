"""
Simple File-Backed Draft Store for ScopeGen

Keeps saved proposal drafts in memory and mirrors them to a JSON file.
Used when Supabase is not configured.
"""

import os
import json
import logging
import uuid
from datetime import datetime
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

# File-based persistence (simple JSON file)
DATA_FILE = os.getenv("DRAFT_DATA_FILE", "/tmp/scopegen_drafts.json")


class DraftStore:
    """In-memory draft store with file persistence."""

    def __init__(self, data_file: Optional[str] = None):
        self.data_file = data_file or DATA_FILE
        self.drafts: Dict[str, Dict[str, Any]] = {}
        self._load_from_file()

    def _load_from_file(self):
        """Load drafts from JSON file if it exists."""
        try:
            if os.path.exists(self.data_file):
                with open(self.data_file, 'r') as f:
                    self.drafts = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not load draft data: %s", e)

    def _save_to_file(self):
        """Save drafts to JSON file."""
        try:
            with open(self.data_file, 'w') as f:
                json.dump(self.drafts, f, indent=2)
        except OSError as e:
            logger.warning("Could not save draft data: %s", e)

    def save_draft(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Store a flattened draft record and return it with id and timestamps."""
        now = datetime.now().isoformat()
        draft = dict(record)
        draft["id"] = str(uuid.uuid4())
        draft["created_at"] = now
        draft["updated_at"] = now
        self.drafts[draft["id"]] = draft
        self._save_to_file()
        return draft

    def get_draft(self, draft_id: str) -> Optional[Dict[str, Any]]:
        """Get a draft by ID."""
        return self.drafts.get(draft_id)


# Global instance
draft_store = DraftStore()
