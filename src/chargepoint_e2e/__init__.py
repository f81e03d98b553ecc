"""Charge point E2E - API client, logger and helpers for the charge point suite."""

from chargepoint_e2e.__version__ import (
    __author__,
    __description__,
    __license__,
    __title__,
    __version__,
    __version_info__,
    get_version,
    get_version_info,
)
from chargepoint_e2e.api_client import ApiClient, ApiResult
from chargepoint_e2e.config import E2ESettings, get_settings
from chargepoint_e2e.exceptions import (
    ApiResponseError,
    ChargePointE2EError,
    ChargePointNotFoundError,
)
from chargepoint_e2e.logger import TestLogger, configure_logging, get_test_logger
from chargepoint_e2e.models import ChargePoint
from chargepoint_e2e.serials import generate_serial_number, generate_serial_numbers

__all__ = [
    "__version__",
    "__version_info__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "get_version",
    "get_version_info",
    "ApiClient",
    "ApiResult",
    "ApiResponseError",
    "ChargePoint",
    "ChargePointE2EError",
    "ChargePointNotFoundError",
    "E2ESettings",
    "TestLogger",
    "configure_logging",
    "generate_serial_number",
    "generate_serial_numbers",
    "get_settings",
    "get_test_logger",
]
