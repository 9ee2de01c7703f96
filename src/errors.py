"""Error types shared across the supplier directory packages.

None of these are meant to escape to a top-level handler: each one is
caught at the boundary nearest its origin and turned into a result value
(an empty listing, an empty selection set, a ``False`` return).
"""

from typing import Optional


class DirectoryError(Exception):
    """Base class for supplier directory errors."""

    pass


class FetchFailed(DirectoryError):
    """The listing endpoint call did not succeed.

    Raised for transport failures, non-2xx responses and envelopes that
    carry ``success: false``. Always retryable from the caller's side.
    """

    retryable = True

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StorageCorrupt(DirectoryError):
    """Persisted selection data could not be parsed."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored value for '{key}' is not readable: {reason}")
        self.key = key
        self.reason = reason


class CapacityExceeded(DirectoryError):
    """An add was attempted on a selection set that is already full."""

    def __init__(self, key: str, capacity: int):
        super().__init__(f"Maximum of {capacity} reached for '{key}'")
        self.key = key
        self.capacity = capacity
