"""Validation configuration constants.

This module centralizes the business id format rules and the reason messages
reported when a rule is not satisfied. The message templates are part of the
public contract: callers match on the exact text.

Format:
    NNNNNNN-C  (7 digits, separator, 1 check digit)
"""

from __future__ import annotations

from typing import Tuple

# ============================================================================
# FORMAT CONSTANTS
# ============================================================================

BUSINESS_ID_LENGTH = 9
SEPARATOR = "-"

# Offset of the separator counted from the end of the string
SEPARATOR_OFFSET_FROM_END = 2

# Characters accepted when reading digit values for the checksum.
# The digit rule accepts any Unicode decimal digit; the checksum only reads ASCII.
CHECKSUM_DIGITS = "0123456789"


# ============================================================================
# CHECKSUM CONSTANTS
# ============================================================================

CHECKSUM_BASE_LENGTH = 7
CHECKSUM_MODULUS = 11

# Index 0 weighs the digit immediately before the separator, working backward
CHECKSUM_MULTIPLIERS: Tuple[int, ...] = (2, 4, 8, 5, 10, 9, 7)

FORBIDDEN_CHECK_DIGIT = 1


# ============================================================================
# REASON MESSAGES
# ============================================================================
# Format: {message_id: template}. Templates use str.format() placeholders.

NULL_MESSAGE = "BusinessId should not be null"
LENGTH_MESSAGE = "BusinessId length is not 9 characters"
SEPARATOR_MESSAGE = "Separator character '-' not found in correct position"
DIGIT_MESSAGE = "Character {char} at position {position} is not a digit"
CHECKSUM_ONE_MESSAGE = "Checksum cannot be 1"
CHECKSUM_MISMATCH_MESSAGE = "Checksum {actual} is not correct, should be {expected}"

_MESSAGE_MAP = {
    "not_null": NULL_MESSAGE,
    "length": LENGTH_MESSAGE,
    "separator": SEPARATOR_MESSAGE,
    "digit": DIGIT_MESSAGE,
    "checksum_one": CHECKSUM_ONE_MESSAGE,
    "checksum_mismatch": CHECKSUM_MISMATCH_MESSAGE,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_message(message_id: str, **kwargs: object) -> str:
    """Render the reason message for a failed rule.

    Args:
        message_id: Message identifier (e.g., "digit", "checksum_mismatch").
        **kwargs: Values for the template placeholders.

    Returns:
        The rendered reason string.

    Raises:
        ValueError: If message_id is unknown or a placeholder value is missing.

    Examples:
        >>> get_message("digit", char="A", position=1)
        'Character A at position 1 is not a digit'
        >>> get_message("checksum_mismatch", actual=9, expected=8)
        'Checksum 9 is not correct, should be 8'
    """
    if message_id not in _MESSAGE_MAP:
        raise ValueError(f"Unknown message_id: {message_id}")

    template = _MESSAGE_MAP[message_id]
    try:
        return template.format(**kwargs)
    except KeyError as e:
        raise ValueError(
            f"Missing value {e} for message '{message_id}'. Template: {template!r}"
        ) from e


def get_separator_index(business_id: str) -> int:
    """Return the index where the separator is expected.

    The result is negative for strings shorter than two characters.

    Examples:
        >>> get_separator_index("0204819-8")
        7
        >>> get_separator_index("1")
        -1
    """
    return len(business_id) - SEPARATOR_OFFSET_FROM_END
