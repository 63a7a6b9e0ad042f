import structlog
from starlette.types import ASGIApp, Receive, Scope, Send

from permittrack.pipeline.audit import log_acceptance, log_rejection
from permittrack.pipeline.context import DEFAULT_PIPELINE_CONFIG, PipelineConfig, RequestFacts
from permittrack.pipeline.executor import run_pipeline
from permittrack.pipeline.response import ResponseWriter

log = structlog.get_logger()


class RequestValidationMiddleware:
    """ASGI middleware that validates every HTTP request before routing.

    Runs the validation pipeline on the request headers. A rejection is
    answered directly with a JSON error body; an accepted request is handed to
    the wrapped app with its original ``receive`` so the body is untouched.
    """

    def __init__(self, app: ASGIApp, config: PipelineConfig = DEFAULT_PIPELINE_CONFIG) -> None:
        self.app = app
        self.config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            log.debug("non_http_scope_skipped", scope_type=scope["type"])
            await self.app(scope, receive, send)
            return

        facts = RequestFacts.from_scope(scope)
        result = run_pipeline(facts, self.config)

        if not result.passed:
            log_rejection(facts, result)
            await ResponseWriter(scope, receive, send).write(result)
            return

        log_acceptance(facts)
        await self.app(scope, receive, send)
