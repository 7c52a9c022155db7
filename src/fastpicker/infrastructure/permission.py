from __future__ import annotations

from fastpicker.application.interfaces import IPermissionService
from fastpicker.domain.models import PermissionStatus


class StaticPermissionService(IPermissionService):
    """Permission service that always answers with a fixed status.

    Desktop file systems have no photo permission prompt; the CLI and
    headless embeddings use this to stand in for the platform dialog.
    """

    def __init__(self, status: PermissionStatus = PermissionStatus.AUTHORIZED) -> None:
        self._status = PermissionStatus(status)
        self.request_count = 0

    async def request_access(self) -> PermissionStatus:
        self.request_count += 1
        return self._status
