from collections.abc import Callable

import structlog

from permittrack.pipeline import (
    body_presence,
    content_headers,
    head_body_presence,
    method_allowlist,
    size_limit,
)
from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

log = structlog.get_logger()

Stage = Callable[[RequestFacts, PipelineConfig], StageResult]

# Ordered list of pipeline stages. content_headers must run before size_limit:
# the declared length is only trusted once the headers have been validated.
STAGES: list[tuple[str, Stage]] = [
    (method_allowlist.STAGE_NAME, method_allowlist.execute),
    (body_presence.STAGE_NAME, body_presence.execute),
    (content_headers.STAGE_NAME, content_headers.execute),
    (size_limit.STAGE_NAME, size_limit.execute),
    (head_body_presence.STAGE_NAME, head_body_presence.execute),
]

ACCEPTED = "accepted"


def run_pipeline(
    facts: RequestFacts,
    config: PipelineConfig,
    stages: list[tuple[str, Stage]] | None = None,
) -> StageResult:
    """Run all stages in order. Return the first rejection, or a passing result."""
    for stage_name, stage_fn in stages if stages is not None else STAGES:
        try:
            result = stage_fn(facts, config)
        except Exception as e:
            # Fail-closed: stage crash = rejection
            log.error("pipeline_stage_error", stage=stage_name, error=str(e))
            result = StageResult.reject(stage_name, status=400, reason="Invalid request")

        if not result.passed:
            return result

    return StageResult.proceed(ACCEPTED)
