"""Phone number normalization (Indian national format)."""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_TEN_DIGITS_RE = re.compile(r"\d{10}")
_COUNTRY_PREFIXED_RE = re.compile(r"91\d{10}")


def normalize_phone_number(raw: str) -> str:
    """Return the canonical form used as dedup key and SMS destination.

    First match wins:
      "+91..."        -> leading "+" dropped
      10 digits       -> "91" prepended
      "91" + 10 digits -> unchanged
      anything else   -> whitespace-stripped input
    """
    if not raw:
        return ""

    s = _WHITESPACE_RE.sub("", raw)
    if s.startswith("+91"):
        return s[1:]
    if _TEN_DIGITS_RE.fullmatch(s):
        return f"91{s}"
    if _COUNTRY_PREFIXED_RE.fullmatch(s):
        return s
    return s
