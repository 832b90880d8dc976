"""
Upload Status Poller

Polls the asset status endpoint until the platform reports a terminal state
or the overall budget runs out.

State machine (first recipe status):

    WAITING_UPLOAD -> sleep, re-poll
    PROCESSING     -> sleep, re-poll
    INCOMPLETE     -> UploadIncomplete
    CLIENT_ERROR   -> UploadClientError
    AVAILABLE      -> done
    anything else  -> sleep, re-poll (lenient)
"""

import logging
from typing import Optional

from assets.constants import (
    ASSET_STATUS_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    POLL_SLEEP_SECONDS,
    AssetStatus,
)
from assets.exceptions import (
    UploadClientError,
    UploadIncomplete,
    UploadStatusError,
    UploadTimeout,
)
from assets.implementations.system_clock import SystemClock
from assets.interfaces.clock_interface import ClockInterface
from assets.interfaces.transport_interface import HttpTransportInterface
from assets.models.asset import AssetStatusResponse, asset_id_from_entity
from config.settings import HTTP_TIMEOUT


class UploadStatusPoller:
    """
    Timed-retry loop over the status endpoint.

    The budget is checked before every attempt; each attempt is a fresh GET.
    Nothing is carried across iterations except the deadline.
    """

    def __init__(
        self,
        transport: HttpTransportInterface,
        api_base: str,
        interval: float = POLL_SLEEP_SECONDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Optional[ClockInterface] = None,
        request_timeout: float = HTTP_TIMEOUT,
    ):
        """
        Initialize poller.

        Args:
            transport: Authenticated HTTP transport
            api_base: API URL including version
            interval: Sleep between polls (seconds)
            timeout: Overall polling budget (seconds)
            clock: Time source (SystemClock by default)
            request_timeout: Timeout of each status GET (seconds)
        """
        self.logger = logging.getLogger(__name__)
        self.transport = transport
        self.api_base = api_base.rstrip("/")
        self.interval = interval
        self.timeout = timeout
        self.clock = clock or SystemClock()
        self.request_timeout = request_timeout

    def status_url(self, asset_entity: str) -> str:
        asset_id = asset_id_from_entity(asset_entity)
        return f"{self.api_base}{ASSET_STATUS_PATH.format(asset_id=asset_id)}"

    def fetch_status(self, asset_entity: str) -> AssetStatusResponse:
        """
        Query the status endpoint once.

        Raises:
            UploadStatusError: Non-success status or malformed response
        """
        response = self.transport.get(
            self.status_url(asset_entity),
            timeout=self.request_timeout,
        )

        if not response.ok:
            raise UploadStatusError(
                f"Status query failed for {asset_entity}: HTTP {response.status_code}",
                status_code=response.status_code,
                asset_entity=asset_entity,
            )

        try:
            return AssetStatusResponse.from_dict(response.json())
        except ValueError as e:  # invalid JSON or ResponseDecodeError
            raise UploadStatusError(
                f"Malformed status response for {asset_entity}: {e}",
                status_code=response.status_code,
                asset_entity=asset_entity,
            ) from e

    def poll(self, asset_entity: str) -> AssetStatusResponse:
        """
        Poll until AVAILABLE.

        Returns:
            The status response that reported AVAILABLE

        Raises:
            UploadIncomplete: Platform reported INCOMPLETE
            UploadClientError: Platform reported CLIENT_ERROR
            UploadTimeout: Budget elapsed in a non-terminal state
            UploadStatusError: Status endpoint failed
        """
        deadline = self.clock.monotonic() + self.timeout
        attempts = 0
        last_status = None

        while True:
            remaining = deadline - self.clock.monotonic()
            if remaining <= 0:
                self.logger.error(
                    f"Timed out after {self.timeout}s waiting for {asset_entity} "
                    f"(last status: {last_status}, polls: {attempts})",
                )
                raise UploadTimeout(
                    f"Asset {asset_entity} not available after {self.timeout}s "
                    f"(last status: {last_status})",
                    asset_entity=asset_entity,
                )

            attempts += 1
            response = self.fetch_status(asset_entity)
            last_status = response.status
            status = response.asset_status

            if status is AssetStatus.AVAILABLE:
                self.logger.info(f"Asset {asset_entity} available after {attempts} poll(s)")
                return response

            if status is AssetStatus.INCOMPLETE:
                self.logger.error(f"Asset {asset_entity} reported INCOMPLETE")
                raise UploadIncomplete(
                    f"Upload of {asset_entity} is incomplete",
                    asset_entity=asset_entity,
                )

            if status is AssetStatus.CLIENT_ERROR:
                self.logger.error(f"Asset {asset_entity} reported CLIENT_ERROR")
                raise UploadClientError(
                    f"Upload of {asset_entity} was rejected (CLIENT_ERROR)",
                    asset_entity=asset_entity,
                )

            if status is None:
                self.logger.warning(
                    f"Unrecognized status '{last_status}' for {asset_entity}, "
                    f"polling again",
                )
            else:
                self.logger.debug(f"Asset {asset_entity} is {status.value}")

            remaining = deadline - self.clock.monotonic()
            self.clock.sleep(max(0.0, min(self.interval, remaining)))
