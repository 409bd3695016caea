"""Exception hierarchy for s3-browser.

Errors raised by the storage service itself are not part of this hierarchy;
they reach callers as the botocore exceptions they already are.
"""


class S3BrowserError(Exception):
    """Base exception for all s3-browser errors."""

    pass


class ValidationError(S3BrowserError):
    """Raised when local input such as an S3 path fails validation."""

    pass
