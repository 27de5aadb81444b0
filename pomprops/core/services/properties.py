"""
Properties text format — ``java.util.Properties`` store/load via jproperties.

pom.properties is consumed by JVM tooling that reads it with
``Properties.load``. jproperties does the escaping; two details are
adjusted so the bytes match ``Properties.store``:

    - entries keep mapping order (jproperties sorts keys it did not load)
    - \\uXXXX escapes use uppercase hex, as Java writes them

The optional date comment is written here so the clock can be injected.
Lines end with ``\\n`` regardless of platform.
"""

from __future__ import annotations

import io
import re
from collections.abc import Mapping
from datetime import UTC, datetime

from jproperties import Properties

from pomprops.core.services.errors import SerializationError

ENCODING = "iso-8859-1"

# a \u escape is real only when preceded by an even run of backslashes
_UNICODE_ESCAPE = re.compile(r"(?<!\\)((?:\\\\)*)\\u([0-9a-f]{4})")

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


# ═══════════════════════════════════════════════════════════════════
#  Store
# ═══════════════════════════════════════════════════════════════════


def store_properties(
    properties: Mapping[str, str],
    comments: str | None = None,
    *,
    timestamp: bool = False,
    now: datetime | None = None,
) -> bytes:
    """Serialize ``properties`` in mapping order.

    Args:
        properties: Ordered key → value mapping. Keys and values must be str.
        comments: Optional header comment, written first.
        timestamp: Also write a date comment line, as Java does.
        now: Clock override for the date comment.

    Returns:
        The encoded file content.

    Raises:
        SerializationError: A key or value is not a string, or jproperties
            could not encode the output.
    """
    chunks: list[bytes] = []
    if comments is not None:
        chunks.append(_store(Properties(), comments))
    if timestamp:
        chunks.append(f"#{java_date(now or datetime.now(UTC))}\n".encode(ENCODING))

    for key, value in properties.items():
        entry = Properties()
        try:
            entry[key] = value
        except TypeError as e:
            raise SerializationError(
                f"Property {key!r} must map str to str, got "
                f"{type(key).__name__} → {type(value).__name__}"
            ) from e
        chunks.append(_store(entry))

    return b"".join(chunks)


def java_date(moment: datetime) -> str:
    """Format like ``java.util.Date.toString()``: ``Mon Oct 19 10:00:00 UTC 2026``."""
    zone = moment.tzname() or "UTC"
    return (
        f"{_DAYS[moment.weekday()]} {_MONTHS[moment.month - 1]} {moment.day:02d} "
        f"{moment:%H:%M:%S} {zone} {moment.year}"
    )


def _store(props: Properties, comments: str | None = None) -> bytes:
    buf = io.BytesIO()
    try:
        props.store(buf, initial_comments=comments, encoding=ENCODING, timestamp=False)
    except (UnicodeEncodeError, LookupError) as e:
        raise SerializationError(f"Unencodable properties content: {e}") from e
    text = buf.getvalue().decode(ENCODING)
    return _UNICODE_ESCAPE.sub(_upper_hex, text).encode(ENCODING)


def _upper_hex(match: re.Match[str]) -> str:
    return f"{match.group(1)}\\u{match.group(2).upper()}"


# ═══════════════════════════════════════════════════════════════════
#  Load
# ═══════════════════════════════════════════════════════════════════


def load_properties(data: bytes | str) -> dict[str, str]:
    """Parse properties text, keeping file order.

    Raises:
        jproperties.ParseError: Malformed input, e.g. a bad \\uXXXX escape.
    """
    props = Properties()
    props.load(data, encoding=ENCODING)
    return {key: props[key].data for key in props}
