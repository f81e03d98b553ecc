"""
HTTP client for the charge point API.

Wraps a Playwright ``APIRequestContext`` so API calls share the runner's
request handling (proxy, tracing, cookies) with the browser tests.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from playwright.async_api import APIRequestContext, APIResponse

from .exceptions import ApiResponseError, ChargePointNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001"
CHARGE_POINT_PATH = "/charge-point"


@dataclass
class ApiResult:
    """Status and decoded body of an API call that is not asserted."""

    status: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


class ApiClient:
    """
    Client for the charge point collection resource.

    ``get_charge_points`` requires success and raises ``ApiResponseError``
    otherwise. ``add_charge_point`` and ``delete_charge_point`` return an
    ``ApiResult`` so tests can assert on rejections as well as successes.
    """

    def __init__(
        self,
        request_context: APIRequestContext,
        base_url: str = DEFAULT_API_URL,
    ):
        self.request_context = request_context
        self.base_url = base_url.rstrip("/")

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{CHARGE_POINT_PATH}"

    def item_url(self, charge_point_id: str) -> str:
        return f"{self.collection_url}/{charge_point_id}"

    async def get_charge_points(self) -> list[dict[str, Any]]:
        """
        Get all charge points.

        Returns:
            The decoded JSON array of charge point records.

        Raises:
            ApiResponseError: If the API does not answer with a 2xx status.
        """
        url = self.collection_url
        response = await self.request_context.get(url)
        logger.debug("GET %s -> %s", url, response.status)

        if not response.ok:
            raise ApiResponseError("GET", url, response.status,
                                   await _read_body(response))
        return await response.json()

    async def add_charge_point(self, serial_number: str) -> ApiResult:
        """
        Create a charge point.

        Args:
            serial_number: The serial number to create.

        Returns:
            ApiResult with the response status and decoded body.
        """
        url = self.collection_url
        response = await self.request_context.post(
            url,
            data={"serialNumber": serial_number},
            headers={"Content-Type": "application/json"},
        )
        logger.debug("POST %s serialNumber=%r -> %s",
                     url, serial_number, response.status)

        return ApiResult(status=response.status, data=await _read_body(response))

    async def find_charge_point(self, serial_number: str) -> dict[str, Any]:
        """
        Find the first charge point with the given serial number.

        Raises:
            ChargePointNotFoundError: If no record matches.
        """
        charge_points = await self.get_charge_points()
        for charge_point in charge_points:
            if charge_point.get("serialNumber") == serial_number:
                return charge_point
        raise ChargePointNotFoundError(
            serial_number, {"available": len(charge_points)}
        )

    async def delete_charge_point_by_serial_number(
        self, serial_number: str
    ) -> ApiResult:
        """
        Delete the charge point with the given serial number.

        Args:
            serial_number: Serial number of the charge point to delete.

        Returns:
            ApiResult with the DELETE status.

        Raises:
            ChargePointNotFoundError: If no record matches.
        """
        charge_point = await self.find_charge_point(serial_number)
        return await self.delete_charge_point(charge_point["id"])

    async def delete_charge_point(self, charge_point_id: str) -> ApiResult:
        """Delete a charge point by ID."""
        url = self.item_url(charge_point_id)
        response = await self.request_context.delete(url)
        logger.debug("DELETE %s -> %s", url, response.status)

        return ApiResult(status=response.status)

    async def delete_all_charge_points(self) -> list[ApiResult]:
        """Delete every charge point, one at a time in list order."""
        results = []
        for charge_point in await self.get_charge_points():
            results.append(await self.delete_charge_point(charge_point["id"]))
        return results


async def _read_body(response: APIResponse) -> Optional[Any]:
    """Decode a JSON body, falling back to text for anything else."""
    body = await response.body()
    if not body:
        return None
    try:
        return await response.json()
    except ValueError:
        return await response.text()
