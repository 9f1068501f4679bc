"""Page descriptor used for paginated queries."""

from dataclasses import dataclass

# Largest page index or size accepted, the range of a signed 32-bit int
MAX_PAGE_VALUE = 2**31 - 1


class InvalidPageRequestError(ValueError):
    """Raised when a page index or page size is out of range."""


@dataclass(frozen=True)
class PageRequest:
    """A zero-based page index and a page size.

    Invalid values are rejected rather than clamped. Both values are capped
    at MAX_PAGE_VALUE so the offset always fits a 64-bit SQL integer.
    """

    page: int = 0
    size: int = 10

    def __post_init__(self) -> None:
        if not 0 <= self.page <= MAX_PAGE_VALUE:
            raise InvalidPageRequestError(
                f"Page index must be between 0 and {MAX_PAGE_VALUE}, got {self.page}"
            )
        if not 1 <= self.size <= MAX_PAGE_VALUE:
            raise InvalidPageRequestError(
                f"Page size must be between 1 and {MAX_PAGE_VALUE}, got {self.size}"
            )

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size
