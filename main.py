from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from messaging.errors import SmsNotSentError
from messaging.sms import send_sms
from ops.structured_logger import setup_logging

log = logging.getLogger("msm.main")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send one SMS through the MSM gateway.")
    parser.add_argument("phone", help="recipient, e.g. 994501234567")
    parser.add_argument("message")
    args = parser.parse_args(argv)

    setup_logging()
    try:
        send_sms(args.phone, args.message)
    except SmsNotSentError as e:
        log.error("sms_not_sent", extra={"extra": {"event": "sms_not_sent", "text": e.text}})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
