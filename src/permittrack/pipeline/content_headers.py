from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

STAGE_NAME = "content_headers"

JSON_CONTENT_TYPE = "application/json"
BODY_METHODS = frozenset({"POST", "PUT"})


def execute(facts: RequestFacts, config: PipelineConfig) -> StageResult:
    """Require an exact JSON content type and a known Content-Length on POST/PUT."""
    if facts.method not in BODY_METHODS:
        return StageResult.proceed(STAGE_NAME)

    if facts.content_type is None:
        return StageResult.reject(STAGE_NAME, status=400, reason="Missing Content-Type header")

    # Exact match: parameters such as "; charset=utf-8" are not accepted
    if facts.content_type.lower() != JSON_CONTENT_TYPE:
        return StageResult.reject(
            STAGE_NAME,
            status=415,
            reason="Unsupported media type",
            body_key="error",
        )

    if facts.content_length < 0:
        return StageResult.reject(
            STAGE_NAME,
            status=400,
            reason="Missing or unknown Content-Length header",
        )

    return StageResult.proceed(STAGE_NAME)
