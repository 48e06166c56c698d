from __future__ import annotations

import re
from datetime import date
from typing import Iterable


QUOTATION_PREFIX = "ALK"
FIRST_SERIAL = 100000
MAX_SERIAL = 999998
_NO_SERIAL = FIRST_SERIAL - 2

_SERIAL_RE = re.compile(r"\d{6}", re.ASCII)


def quotation_date_prefix(day: date) -> str:
    return f"{QUOTATION_PREFIX} {day:%d-%m-%Y}-"


def format_quotation_number(day: date, serial: int) -> str:
    return f"{quotation_date_prefix(day)}{serial:06d}"


def parse_quotation_serial(quotation_number: str, day: date) -> int | None:
    """Serial of a quotation number issued on `day`, or None when it does not parse."""
    number = quotation_number.strip()
    prefix = quotation_date_prefix(day)
    if not number.startswith(prefix):
        return None
    serial_text = number[len(prefix):].strip()
    if not _SERIAL_RE.fullmatch(serial_text):
        return None
    serial = int(serial_text)
    if serial < FIRST_SERIAL:
        return None
    return serial


def next_quotation_number(quotation_numbers: Iterable[str], today: date) -> str:
    """Next quotation number for `today`: ALK DD-MM-YYYY-SSSSSS.

    Serials restart at 100000 each day and are always even. An odd serial
    found in history (entered by hand) is rounded up to the next even one.
    Malformed numbers are ignored. Serials are capped at 999998; once the
    cap is reached every further call returns that same number again.
    """
    max_serial = _NO_SERIAL
    for number in quotation_numbers:
        if not number:
            continue
        serial = parse_quotation_serial(number, today)
        if serial is not None and serial > max_serial:
            max_serial = serial

    if max_serial < FIRST_SERIAL:
        next_serial = FIRST_SERIAL
    elif max_serial % 2 == 0:
        next_serial = max_serial + 2
    else:
        next_serial = max_serial + 1

    return format_quotation_number(today, min(next_serial, MAX_SERIAL))
