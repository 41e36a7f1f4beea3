"""Service exceptions"""


class TelemetryServerError(Exception):
    """Base class for telemetry server errors."""


class DatasetLoadError(TelemetryServerError):
    """Raised when the playback dataset is missing or unusable."""


class PayloadTooLargeError(TelemetryServerError):
    """Raised when a submission body exceeds the configured size limit."""
