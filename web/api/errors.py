"""API errors and validation helpers."""

from app.services import SummaryService


class ServiceUnavailableError(Exception):
    """Data not loaded yet."""

    def __init__(self, message: str = "Data not loaded"):
        self.message = message
        super().__init__(self.message)


def ensure_ready(service: SummaryService) -> None:
    """Refuse to answer before the record store has loaded."""
    if not service.ready:
        raise ServiceUnavailableError("Summary data is not loaded yet")
