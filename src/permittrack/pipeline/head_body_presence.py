from permittrack.pipeline.context import PipelineConfig, RequestFacts, StageResult

STAGE_NAME = "head_body_presence"


def execute(facts: RequestFacts, config: PipelineConfig) -> StageResult:
    if facts.method == "HEAD" and facts.content_length > 0:
        return StageResult.reject(
            STAGE_NAME,
            status=400,
            reason="Request body not allowed for HEAD requests",
        )
    return StageResult.proceed(STAGE_NAME)
