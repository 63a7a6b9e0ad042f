from dataclasses import dataclass, field

from starlette.datastructures import Headers
from starlette.types import Scope

MAX_BODY_BYTES = 2 * 1024 * 1024  # 2 MiB, inclusive
ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "HEAD"})

# Sentinel for a Content-Length that is absent, unparsable or negative
UNKNOWN_LENGTH = -1


@dataclass(frozen=True)
class PipelineConfig:
    max_body_bytes: int = MAX_BODY_BYTES
    allowed_methods: frozenset[str] = field(default=ALLOWED_METHODS)


DEFAULT_PIPELINE_CONFIG = PipelineConfig()


def _parse_content_length(raw: str | None) -> int:
    if raw is None:
        return UNKNOWN_LENGTH
    # Content-Length = 1*DIGIT; signs, underscores and other int() syntax are rejected
    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        return UNKNOWN_LENGTH
    return int(value)


@dataclass(frozen=True)
class RequestFacts:
    """Read-only view of the request headers the validation stages look at."""

    method: str
    path: str
    content_type: str | None = None
    content_length: int = UNKNOWN_LENGTH

    @classmethod
    def from_scope(cls, scope: Scope) -> "RequestFacts":
        headers = Headers(scope=scope)
        return cls(
            method=scope["method"],
            path=scope.get("path", ""),
            content_type=headers.get("content-type"),
            content_length=_parse_content_length(headers.get("content-length")),
        )


@dataclass(frozen=True)
class StageResult:
    stage: str
    passed: bool
    status: int = 200
    reason: str = ""
    body_key: str = "message"

    @classmethod
    def proceed(cls, stage: str) -> "StageResult":
        return cls(stage=stage, passed=True)

    @classmethod
    def reject(
        cls, stage: str, status: int, reason: str, body_key: str = "message"
    ) -> "StageResult":
        return cls(stage=stage, passed=False, status=status, reason=reason, body_key=body_key)

    def body(self) -> dict[str, str]:
        return {self.body_key: self.reason}
