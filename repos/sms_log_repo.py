from __future__ import annotations

import logging
import uuid
from typing import Optional

from google.cloud.firestore import Client
from storage.firestore_client import get_firestore_client
from models.schema import COL_SMS_LOGS
from models.sms_log import SmsLogEntry

log = logging.getLogger("msm.repo")


class SmsLogRepository:
    def __init__(self, db: Optional[Client] = None):
        self.db = db or get_firestore_client()

    def create(self, entry: SmsLogEntry) -> str:
        log_id = str(uuid.uuid4())
        self.db.collection(COL_SMS_LOGS).document(log_id).set(entry.to_doc(), merge=False)
        log.info(
            "sms_log_written",
            extra={"extra": {"event": "sms_log_written", "log_id": log_id, "response_code": entry.response_code}},
        )
        return log_id
