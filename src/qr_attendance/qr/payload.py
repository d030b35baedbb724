"""Session QR payloads.

Version 1 is the bare form ``<subject>@<date>@<time>``. Decoding also accepts
an explicit ``v1:`` prefix so later versions can be told apart.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass

import qrcode

from ..common.validators import is_hh_mm, is_iso_date
from ..core.exceptions import MalformedPayload, ValidationError

PAYLOAD_VERSION = 1
SEPARATOR = "@"

_VERSION_PREFIX = re.compile(r"^v(\d+):")
_COMPACT_TIME = re.compile(r"^\d{4}$")


@dataclass(frozen=True)
class QRPayload:
    subject: str
    date: str
    time: str
    version: int = PAYLOAD_VERSION

    def encode(self) -> str:
        return encode_payload(self.subject, self.date, self.time)


def build_code_value(subject: str, date: str, time: str) -> str:
    return SEPARATOR.join((subject, date, time))


def encode_payload(subject: str, date: str, time: str) -> str:
    if not subject or not date or not time:
        raise ValidationError("All fields required.")
    if SEPARATOR in subject:
        raise ValidationError(f"Subject must not contain '{SEPARATOR}'")
    if not is_iso_date(date):
        raise ValidationError("Date must be a valid YYYY-MM-DD")
    if not is_hh_mm(time):
        raise ValidationError("Time must be HH:MM")
    return build_code_value(subject, date, time)


def normalize_time(value: str) -> str:
    """Turn a compact ``0930`` into ``09:30``; other values pass through."""
    if _COMPACT_TIME.match(value):
        return f"{value[:2]}:{value[2:]}"
    return value


def decode_payload(text: str) -> QRPayload:
    if not text or not text.strip():
        raise MalformedPayload("Empty QR code")

    body = text.strip()
    m = _VERSION_PREFIX.match(body)
    if m:
        version = int(m.group(1))
        if version != PAYLOAD_VERSION:
            raise MalformedPayload(f"Unsupported QR code version: {version}")
        body = body[m.end():]

    parts = body.split(SEPARATOR)
    if len(parts) != 3:
        raise MalformedPayload("QR code is not an attendance code")

    subject, date, time = parts[0], parts[1].strip(), parts[2].strip()
    if not subject.strip():
        raise MalformedPayload("QR code has no subject")
    if not is_iso_date(date):
        raise MalformedPayload(f"Invalid date in QR code: {date!r}")

    time = normalize_time(time)
    if not is_hh_mm(time):
        raise MalformedPayload(f"Invalid time in QR code: {time!r}")

    return QRPayload(subject=subject, date=date, time=time)


def render_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
