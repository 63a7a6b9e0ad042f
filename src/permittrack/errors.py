class PermitTrackError(Exception):
    """Base exception for all PermitTrack errors."""


class PermitNotFoundError(PermitTrackError):
    def __init__(self, permit_id: str) -> None:
        self.permit_id = permit_id
        super().__init__(f"Permit not found: {permit_id}")
