from permittrack.pipeline.content_headers import BODY_METHODS, JSON_CONTENT_TYPE
from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

STAGE_NAME = "size_limit"


def execute(facts: RequestFacts, config: PipelineConfig) -> StageResult:
    """Enforce the declared body ceiling for POST/PUT. A body of exactly the limit passes."""
    if facts.method not in BODY_METHODS:
        return StageResult.proceed(STAGE_NAME)

    if facts.content_length <= config.max_body_bytes:
        return StageResult.proceed(STAGE_NAME)

    content_type = facts.content_type or ""
    if content_type.startswith(JSON_CONTENT_TYPE):
        return StageResult.reject(
            STAGE_NAME,
            status=413,
            reason="JSON request payload exceeds 2 MB limit",
        )

    # Not reachable behind content_headers, which already rejects non-JSON bodies
    return StageResult.reject(
        STAGE_NAME,
        status=415,
        reason="Unsupported media type: only application/json requests are allowed up to 2 MB",
    )
