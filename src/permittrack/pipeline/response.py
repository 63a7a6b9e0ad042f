import structlog
from starlette.responses import JSONResponse
from starlette.types import Receive, Scope, Send

from permittrack.pipeline.context import StageResult

log = structlog.get_logger()

JSON_UTF8 = "application/json; charset=UTF-8"


class ResponseWriter:
    """Writes a rejection straight to the ASGI ``send`` channel, at most once.

    Rejected requests never reach the application's exception handlers, so the
    JSON error body has to be produced here.
    """

    def __init__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self._scope = scope
        self._receive = receive
        self._send = send
        self._written = False

    @property
    def written(self) -> bool:
        return self._written

    async def write(self, result: StageResult) -> None:
        if self._written:
            log.debug("rejection_already_written", stage=result.stage)
            return
        self._written = True

        response = JSONResponse(
            status_code=result.status,
            content=result.body(),
            media_type=JSON_UTF8,
        )
        try:
            await response(self._scope, self._receive, self._send)
        except Exception as e:
            # Part of the response may already be on the wire; nothing to recover
            log.error(
                "rejection_write_failed",
                stage=result.stage,
                status=result.status,
                error=str(e),
            )
