"""
Charge point record model and the validation contract of the app under test.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

# Messages rendered in the UI's .error-message element
SERIAL_NUMBER_REQUIRED = "Serial number is required"
SERIAL_NUMBER_EXISTS = "Serial number already exists"
INVALID_SERIAL_NUMBER_FORMAT = "Invalid serial number format"

# Characters the app refuses in a serial number
INVALID_SERIAL_CHARACTERS = "$@#%&"

# Shortest serial number length the API is expected to reject
OVERSIZED_SERIAL_NUMBER_LENGTH = 102


class ChargePoint(BaseModel):
    """A charge point record as returned by the API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictStr = Field(..., min_length=1, description="Server-assigned ID")
    serial_number: StrictStr = Field(
        ..., alias="serialNumber", description="Client-supplied serial number"
    )


def oversized_serial_number() -> str:
    """Return a serial number exactly at the rejected length."""
    return "SN" + "1" * (OVERSIZED_SERIAL_NUMBER_LENGTH - 2)
