from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

STAGE_NAME = "body_presence"

BODYLESS_METHODS = frozenset({"GET", "DELETE"})


def execute(facts: RequestFacts, config: PipelineConfig) -> StageResult:
    """GET and DELETE must not declare a body. Zero or unknown length passes."""
    if facts.method in BODYLESS_METHODS and facts.content_length > 0:
        return StageResult.reject(
            STAGE_NAME,
            status=400,
            reason=f"Request body not allowed for {facts.method} requests",
        )
    return StageResult.proceed(STAGE_NAME)
