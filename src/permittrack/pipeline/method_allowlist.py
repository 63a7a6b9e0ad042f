from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

STAGE_NAME = "method_allowlist"


def execute(facts: RequestFacts, config: PipelineConfig) -> StageResult:
    """Reject any HTTP method outside the configured allow-list."""
    if facts.method not in config.allowed_methods:
        return StageResult.reject(
            STAGE_NAME,
            status=405,
            reason=f"HTTP method not allowed: {facts.method}",
        )
    return StageResult.proceed(STAGE_NAME)
