"""Built-in leaf codecs.

Each leaf checks one property and fails with one catalog message::

    non_empty_string.decode("")    # fails with "Can not be empty."
    max_length(64).decode("x")     # passes

Parameterized leaves are factory functions that return a codec::

    def max_length(n: int) -> Refinement[str]:
        return refine(str, lambda s: len(s) <= n, f"Max{n}String", "TooLong")

New leaves follow the same recipe with ``refine()``; nothing in this
module needs to change to add one.
"""

import re

from formcodec.codecs.core import Refinement, refine
from formcodec.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Type
# ---------------------------------------------------------------------------

type_string: Refinement[str] = refine(str, lambda _: True, "TypeString", "TypeString")

boolean: Refinement[bool] = refine(bool, lambda _: True, "Boolean", "TypeBoolean")


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------

non_empty_string: Refinement[str] = refine(
    str, lambda s: len(s) > 0, "NonEmptyString", "NonEmptyString"
)

# Unicode whitespace plus the byte order mark, which str.strip() keeps
_UNTRIMMED_RE = re.compile(r"\A[\s\ufeff]|[\s\ufeff]\Z")


def is_trimmed(value: str) -> bool:
    """True if *value* has no leading or trailing whitespace."""
    return _UNTRIMMED_RE.search(value) is None


trimmed_string: Refinement[str] = refine(str, is_trimmed, "TrimmedString", "TrimmedString")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _check_bound(name: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ConfigurationError(f"{name}() needs a non-negative integer, got {n!r}")


def max_length(n: int) -> Refinement[str]:
    """String must be at most *n* characters."""
    _check_bound("max_length", n)
    return refine(str, lambda s: len(s) <= n, f"Max{n}String", "TooLong")


def min_length(n: int) -> Refinement[str]:
    """String must be at least *n* characters."""
    _check_bound("min_length", n)
    return refine(str, lambda s: len(s) >= n, f"Min{n}String", "TooShort")


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Email: structure only, not deliverability. The local part is dot-separated
# atoms (no leading, trailing or doubled dots); the domain is a fully
# qualified name whose labels do not start or end with a hyphen.
_EMAIL_LOCAL_RE = re.compile(
    r"[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+(?:\.[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+)*"
)
_DOMAIN_LABEL_RE = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?")
_TLD_RE = re.compile(r"[a-zA-Z]{2,63}|xn--[a-zA-Z0-9\-]{2,59}")


def is_email(value: str) -> bool:
    """True if *value* looks like an email address."""
    local, at, domain = value.rpartition("@")
    if not at or len(local) > 64 or len(domain) > 253:
        return False
    if _EMAIL_LOCAL_RE.fullmatch(local) is None:
        return False
    *labels, tld = domain.split(".")
    if not labels or _TLD_RE.fullmatch(tld) is None:
        return False
    return all(_DOMAIN_LABEL_RE.fullmatch(label) is not None for label in labels)


# Mobile numbers per locale, national or international format. A number is
# a mobile phone if any locale accepts it.
MOBILE_PHONE_PATTERNS: dict[str, re.Pattern[str]] = {
    "cs-CZ": re.compile(r"(\+?420)? ?[1-9][0-9]{2} ?[0-9]{3} ?[0-9]{3}"),
    "de-DE": re.compile(r"((\+49|0)1)(5[0-25-9]\d|6([23]|0\d?)|7([0-57-9]|6\d))\d{7,9}"),
    "en-AU": re.compile(r"(\+?61|0)4\d{8}"),
    "en-GB": re.compile(r"(\+?44|0)7\d{9}"),
    "en-IN": re.compile(r"(\+?91|0)?[6789]\d{9}"),
    "en-US": re.compile(
        r"((\+1|1)?( |-)?)?(\([2-9][0-9]{2}\)|[2-9][0-9]{2})( |-)?([2-9][0-9]{2}( |-)?[0-9]{4})"
    ),
    "es-ES": re.compile(r"(\+?34)?[67]\d{8}"),
    "fr-FR": re.compile(r"(\+?33|0)[67]\d{8}"),
    "it-IT": re.compile(r"(\+?39)?\s?3\d{2} ?\d{6,7}"),
    "ja-JP": re.compile(r"(\+81[ \-]?(\(0\))?|0)[6789]0[ \-]?\d{4}[ \-]?\d{4}"),
    "nl-NL": re.compile(r"(\+?31|0)6\d{8}"),
    "pl-PL": re.compile(r"(\+?48)? ?[5-8]\d ?\d{3} ?\d{2} ?\d{2}"),
    "ru-RU": re.compile(r"(\+?7|8)?9\d{9}"),
    "sk-SK": re.compile(r"(\+?421)? ?[1-9][0-9]{2} ?[0-9]{3} ?[0-9]{3}"),
    "zh-CN": re.compile(r"((\+|00)86)?(1[3-9]|9[28])\d{9}"),
}


def is_mobile_phone(value: str, locale: str = "any") -> bool:
    """True if *value* is a mobile phone number for *locale*.

    ``"any"`` tries every locale in ``MOBILE_PHONE_PATTERNS``.

    Raises:
        ConfigurationError: If *locale* is neither ``"any"`` nor a known locale.
    """
    if locale == "any":
        patterns = MOBILE_PHONE_PATTERNS.values()
    elif locale in MOBILE_PHONE_PATTERNS:
        patterns = [MOBILE_PHONE_PATTERNS[locale]]
    else:
        known = ", ".join(sorted(MOBILE_PHONE_PATTERNS))
        raise ConfigurationError(f"Unknown phone locale {locale!r}. Known locales: {known}")
    return any(p.fullmatch(value) is not None for p in patterns)


email_format: Refinement[str] = refine(str, is_email, "EmailString", "EmailString")

phone_format: Refinement[str] = refine(str, is_mobile_phone, "PhoneString", "PhoneString")
