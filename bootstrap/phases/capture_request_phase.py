from __future__ import annotations

from typing import TYPE_CHECKING

from application.http.request import Request

from .base_phase import BootstrapPhase, PhaseResult

if TYPE_CHECKING:
    from application.application import Application


class CaptureRequest(BootstrapPhase):
    """Binds a snapshot of the inbound request as ``request``."""

    def execute(self, app: Application) -> PhaseResult:
        request = Request.capture()
        app.instance('request', request)
        app.alias('request', Request)
        return PhaseResult.success_result(
            message=f'Captured {request.method} {request.path}',
            metadata={'method': request.method, 'uri': request.uri}
        )
