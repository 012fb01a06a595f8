from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SmsLogEntry(BaseModel):
    """One persisted send attempt. Written once, never updated."""

    phone: str
    message: Union[int, str]
    response_code: Optional[str] = None
    response_text: Optional[str] = None
    created_at: str = Field(default_factory=_utc_now_iso)

    def to_doc(self) -> Dict[str, Any]:
        return self.model_dump()
