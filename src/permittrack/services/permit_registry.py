import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog

from permittrack.errors import PermitNotFoundError
from permittrack.schemas.permit import PermitRequest, PermitStatus

log = structlog.get_logger()


@dataclass
class Permit:
    permit_name: str
    applicant_name: str
    permit_type: str
    status: PermitStatus
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    submitted_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class PermitRegistry:
    """In-process permit store backing the /permits routes."""

    def __init__(self) -> None:
        self._permits: dict[uuid.UUID, Permit] = {}
        self._lock = asyncio.Lock()

    async def create(self, body: PermitRequest) -> Permit:
        permit = Permit(
            permit_name=body.permit_name,
            applicant_name=body.applicant_name,
            permit_type=body.permit_type,
            status=body.status,
        )
        async with self._lock:
            self._permits[permit.id] = permit
        log.info("permit_created", permit_id=str(permit.id))
        return permit

    def get(self, permit_id: uuid.UUID) -> Permit:
        permit = self._permits.get(permit_id)
        if permit is None:
            raise PermitNotFoundError(str(permit_id))
        return permit

    def list_page(self, page: int, page_size: int) -> list[Permit]:
        """Return one page of permits, oldest first. Pages are zero-based."""
        permits = sorted(self._permits.values(), key=lambda p: p.submitted_date)
        start = page * page_size
        return permits[start : start + page_size]

    async def update(self, permit_id: uuid.UUID, body: PermitRequest) -> Permit:
        async with self._lock:
            permit = self.get(permit_id)
            permit.permit_name = body.permit_name
            permit.applicant_name = body.applicant_name
            permit.permit_type = body.permit_type
            permit.status = body.status
        log.info("permit_updated", permit_id=str(permit_id))
        return permit

    async def delete(self, permit_id: uuid.UUID) -> None:
        async with self._lock:
            if self._permits.pop(permit_id, None) is None:
                raise PermitNotFoundError(str(permit_id))
        log.info("permit_deleted", permit_id=str(permit_id))


# Singleton instance
permit_registry = PermitRegistry()


def get_permit_registry() -> PermitRegistry:
    return permit_registry
