import structlog

from permittrack.pipeline.context import RequestFacts, StageResult

log = structlog.get_logger()


def log_rejection(facts: RequestFacts, result: StageResult) -> None:
    log.warning(
        "request_rejected",
        method=facts.method,
        path=facts.path,
        content_type=facts.content_type,
        content_length=facts.content_length,
        status=result.status,
        stage=result.stage,
        reason=result.reason,
    )


def log_acceptance(facts: RequestFacts) -> None:
    log.info(
        "request_accepted",
        method=facts.method,
        path=facts.path,
        content_length=facts.content_length,
    )
