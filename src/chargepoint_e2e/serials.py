"""Serial number generators for charge point tests."""

import uuid


def generate_serial_number(suffix: str = "") -> str:
    """
    Generate a unique serial number for a test charge point.

    The random part is 8 hex characters from ``uuid4``, so two calls in the
    same millisecond still differ and the value passes the app's character
    whitelist.

    Args:
        suffix: Optional suffix appended to the serial number.

    Returns:
        Serial number such as ``SN3f9a0c1b_1``.
    """
    return f"SN{uuid.uuid4().hex[:8]}{suffix}"


def generate_serial_numbers(*suffixes: str) -> list[str]:
    """Generate one unique serial number per suffix."""
    return [generate_serial_number(suffix) for suffix in suffixes]
