from __future__ import annotations

DEFAULT_LOAD_ERROR = "Failed to load listings"


class ListingsUnavailable(RuntimeError):
    """The one-shot snapshot read failed; there is no partial data."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or DEFAULT_LOAD_ERROR)
        self.message = message or DEFAULT_LOAD_ERROR
