from __future__ import annotations

PRODUCT_NOT_FOUND_MESSAGE = (
    "The product that was requested doesn't exist. Verify the product and try again."
)


class NoSuchEntityError(Exception):
    """A repository lookup did not find the requested entity."""

    def __init__(self, message: str = PRODUCT_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
