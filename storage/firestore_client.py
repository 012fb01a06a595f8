from __future__ import annotations

from typing import Optional

from google.cloud import firestore
from config.settings import settings


def get_firestore_client(project_id: Optional[str] = None) -> firestore.Client:
    """Client for the SMS log store.

    An explicit project wins over FIRESTORE_PROJECT_ID. With neither set the
    library falls back to the ADC default project.
    """
    return firestore.Client(project=project_id or settings.FIRESTORE_PROJECT_ID or None)
