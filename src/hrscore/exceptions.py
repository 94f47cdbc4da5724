"""Error types raised by the analysis and scoring engine."""


class HRScoreError(Exception):
    """Base class for all engine errors."""


class ZoneConfigurationError(HRScoreError, ValueError):
    """Heart rate zones cannot be built from the given physiological values."""


class ComputationError(HRScoreError):
    """A scoring method could not produce a stat change."""


class ExternalServiceError(ComputationError):
    """The external classifier failed, timed out or could not be reached.

    Callers may treat this as recoverable and retry with zone-based scoring.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
