"""Zero-value detection for identities and template versions.

Identities and template versions are opaque strings, usually hex encoded
(``0x04a1...``). A value is "zero" when it is missing, blank, or spells the
number zero: ``"0"``, ``"0x0"``, ``"0x0000"``.
"""

_HEX_PREFIX = "0x"


def is_zero(value: str | None) -> bool:
    """Return True when ``value`` is null or numerically zero."""
    if value is None:
        return True

    text = str(value).strip().lower()
    if text.startswith(_HEX_PREFIX):
        text = text[len(_HEX_PREFIX) :]

    return text.strip("0") == ""
