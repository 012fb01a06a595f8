from __future__ import annotations

import logging
import os
import re
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from urllib.parse import parse_qsl

import httpx
from pydantic import BaseModel, ConfigDict

from config.settings import Settings, settings
from messaging.errors import SmsNotSentError
from models.sms_log import SmsLogEntry
from repos.sms_log_repo import SmsLogRepository

log = logging.getLogger("msm.sender")

URL = "https://api.msm.az/sendsms"

# MSM's documented "message accepted" code.
SUCCESS_CODE = 100

# Numeric strings as PHP 8 reads them: surrounding whitespace, sign, decimal
# digits with optional fraction and exponent. No hex, no underscores, no inf.
_WS = " \t\n\r\v\f"
_WS_RUN = f"[{re.escape(_WS)}]*"
_NUMERIC_RE = re.compile(rf"^{_WS_RUN}[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?{_WS_RUN}$")

Message = Union[int, str]


def _dest_hint(v: str, keep: int = 4) -> str:
    v = (v or "").strip()
    if not v:
        return ""
    if len(v) <= keep:
        return v
    return f"...{v[-keep:]}"


class SendConfig(BaseModel):
    """Credentials and logging switch, fixed for the lifetime of a sender."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = ""
    sender: str = ""
    logging: bool = False

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "SendConfig":
        s = s or settings
        return cls(
            username=s.MSM_USERNAME or "",
            password=s.MSM_PASSWORD or "",
            sender=s.MSM_SENDER or "",
            logging=bool(s.MSM_LOGGING),
        )


@dataclass(frozen=True)
class GatewayResponse:
    code: Optional[str] = None
    text: Optional[str] = None


def parse_response(body: Optional[str]) -> GatewayResponse:
    """Read ``errno``/``errtext`` from a form-encoded body.

    Missing keys come back as None; a repeated key keeps its last value.
    Never raises on garbage, it just finds nothing.
    """
    fields = dict(parse_qsl(body or "", keep_blank_values=True))
    return GatewayResponse(code=fields.get("errno"), text=fields.get("errtext"))


def is_success_code(code: Union[int, str, None]) -> bool:
    """True when ``code`` is loosely equal to 100.

    "100", "0100", "100.0", "1e2" and " 100" all count; "1000", "10",
    "100abc" and None do not.
    """
    if code is None:
        return False
    if isinstance(code, int):
        return code == SUCCESS_CODE
    if not _NUMERIC_RE.match(code):
        return False
    return float(code.strip(_WS)) == SUCCESS_CODE


class SmsSender:
    def __init__(
        self,
        config: Optional[SendConfig] = None,
        client: Optional[httpx.Client] = None,
        log_repo: Optional[SmsLogRepository] = None,
        timeout: Optional[float] = None,
    ):
        self.config = config or SendConfig.from_settings()
        self.client = client
        self.timeout = settings.MSM_HTTP_TIMEOUT if timeout is None else timeout
        self._log_repo = log_repo
        self._repo_lock = threading.Lock()

    @property
    def log_repo(self) -> SmsLogRepository:
        # Built on first use so a sender with logging off never touches Firestore.
        if self._log_repo is None:
            with self._repo_lock:
                if self._log_repo is None:
                    self._log_repo = SmsLogRepository()
        return self._log_repo

    def query_params(self, phone: str, message: Message) -> Dict[str, Any]:
        return {
            "user": self.config.username,
            "password": self.config.password,
            "from": self.config.sender,
            "gsm": phone,
            "text": message,
        }

    def send(self, phone: str, message: Message) -> None:
        """Send one SMS.

        Raises SmsNotSentError unless the gateway answers errno=100. When
        logging is on the attempt is stored before that check, so failures
        are recorded too. httpx and Firestore errors are not caught.
        """
        rev = os.getenv("K_REVISION") or ""
        params = self.query_params(phone, message)

        t0 = time.time()
        log.info(
            "sms_send_attempt",
            extra={"extra": {"event": "sms_send_attempt", "channel": "sms", "dest": _dest_hint(phone), "revision": rev}},
        )

        r = self._get(params)
        resp = parse_response(r.text)
        ok = is_success_code(resp.code)

        log.info(
            "sms_send_result",
            extra={
                "extra": {
                    "event": "sms_send_result",
                    "channel": "sms",
                    "dest": _dest_hint(phone),
                    "ok": ok,
                    "code": resp.code,
                    "status_code": int(getattr(r, "status_code", 0) or 0),
                    "latency_ms": int((time.time() - t0) * 1000),
                    "revision": rev,
                }
            },
        )

        self._log_if_enabled(phone, message, resp)

        if ok:
            return

        log.warning(
            "sms_send_failed",
            extra={"extra": {"event": "sms_send_failed", "dest": _dest_hint(phone), "code": resp.code, "text": resp.text, "revision": rev}},
        )
        raise SmsNotSentError(resp.text)

    def _get(self, params: Dict[str, Any]) -> httpx.Response:
        if self.client is not None:
            return self.client.get(URL, params=params)
        return httpx.get(URL, params=params, timeout=self.timeout)

    def _log_if_enabled(self, phone: str, message: Message, resp: GatewayResponse) -> None:
        if self.config.logging is not True:
            return
        self.log_repo.create(
            SmsLogEntry(
                phone=phone,
                message=message,
                response_code=resp.code,
                response_text=resp.text,
            )
        )


_default_sender: Optional[SmsSender] = None
_default_lock = threading.Lock()


def get_sender() -> SmsSender:
    """Process-wide sender configured from settings."""
    global _default_sender
    if _default_sender is None:
        with _default_lock:
            if _default_sender is None:
                _default_sender = SmsSender()
    return _default_sender


def send_sms(phone: str, message: Message) -> None:
    get_sender().send(phone, message)
