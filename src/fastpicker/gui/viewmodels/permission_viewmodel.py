"""Pure Python PermissionViewModel: no Qt dependency.

Tracks media library authorization for the lifetime of one picker and
drives the two permission banners.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastpicker.application.interfaces import IPermissionService, ITransitionDriver
from fastpicker.config import TRANSITION_DURATION_MS, TRANSITION_REVERSE_DURATION_MS
from fastpicker.domain.models import PermissionStatus
from fastpicker.errors import PermissionRequestError
from fastpicker.errors.handler import ErrorHandler, ErrorSeverity
from fastpicker.events.bus import EventBus
from fastpicker.events.picker_events import PermissionResolvedEvent
from fastpicker.gui.viewmodels.base import BaseViewModel
from fastpicker.gui.viewmodels.signal import ObservableProperty
from fastpicker.gui.viewmodels.transition import Transition


class PermissionViewModel(BaseViewModel):
    """Permission state machine with a derived ``has_access`` flag.

    The request runs at most once; concurrent and later callers share the
    cached result. A denial is terminal for the session: nothing here
    retries, the user has to come back after changing system settings.
    """

    def __init__(
        self,
        permission_service: IPermissionService,
        event_bus: EventBus,
        *,
        error_handler: Optional[ErrorHandler] = None,
        driver: Optional[ITransitionDriver] = None,
        duration_ms: int = TRANSITION_DURATION_MS,
        reverse_duration_ms: int = TRANSITION_REVERSE_DURATION_MS,
    ) -> None:
        super().__init__()
        self._service = permission_service
        self._event_bus = event_bus
        self._errors = error_handler
        self._logger = logging.getLogger(__name__)
        self._request: Optional[asyncio.Future] = None

        self.status = ObservableProperty(PermissionStatus.NOT_DETERMINED)
        self.has_access = ObservableProperty(False)

        self.limited_banner = Transition(
            duration_ms=duration_ms,
            reverse_duration_ms=reverse_duration_ms,
            driver=driver,
            name="limited-banner",
        )
        self.denied_banner = Transition(
            duration_ms=duration_ms,
            reverse_duration_ms=reverse_duration_ms,
            driver=driver,
            name="denied-banner",
        )

        self.connect_signal(self.status.changed, self._on_status_changed)

    async def request_access(self) -> PermissionStatus:
        """Request access once and return the (cached) resulting status."""

        if self._request is None:
            self._request = asyncio.ensure_future(self._perform_request())
        return await asyncio.shield(self._request)

    def update_status(self, status: PermissionStatus) -> None:
        """Apply a status reported from outside the initial request."""

        if self.disposed:
            return
        self.status.value = PermissionStatus(status)

    def dispose(self) -> None:
        super().dispose()
        self.limited_banner.stop()
        self.denied_banner.stop()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    async def _perform_request(self) -> PermissionStatus:
        try:
            status = PermissionStatus(await self._service.request_access())
        except Exception as exc:
            self._report_failure(exc)
            status = PermissionStatus.DENIED

        if self.disposed:
            self._logger.debug("Discarding permission result %s after dispose", status.value)
            return status

        self.status.value = status
        self._event_bus.publish(
            PermissionResolvedEvent(status=status.value, has_access=status.has_access)
        )
        return status

    def _on_status_changed(self, status: PermissionStatus, _old: PermissionStatus) -> None:
        self._logger.info("Media permission is now %s", status.value)
        self.has_access.value = status.has_access

        if status is PermissionStatus.LIMITED:
            self.limited_banner.forward()
        elif status in (PermissionStatus.DENIED, PermissionStatus.RESTRICTED):
            self.denied_banner.forward()
        elif status is PermissionStatus.AUTHORIZED:
            self.limited_banner.reverse()
            self.denied_banner.reverse()

    def _report_failure(self, exc: Exception) -> None:
        if self._errors is None:
            self._logger.error("Permission request failed, treating as denied: %s", exc)
            return
        error = PermissionRequestError(f"Permission request failed, treating as denied: {exc}")
        self._errors.handle(error, ErrorSeverity.WARNING, context={"fallback": "denied"})
