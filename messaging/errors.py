from __future__ import annotations

from typing import Optional


class SmsNotSentError(Exception):
    """The gateway did not accept the message.

    ``text`` is the gateway's ``errtext`` and may be None when the response
    carried no reason (including unparseable bodies).
    """

    def __init__(self, text: Optional[str] = None):
        super().__init__(text or "")
        self.text = text
