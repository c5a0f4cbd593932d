"""
Exception types raised by the analysis pipeline.

Each error is raised where it is detected and mapped to an HTTP status code
only at the API boundary (see ``chartbrief.main``).
"""


class ChartbriefError(Exception):
    """Base class for all pipeline errors; ``message`` is safe to show to users."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileRejectedError(ChartbriefError):
    """Upload failed admissibility checks or the request payload is malformed."""

    status_code = 400


class EmptyCSVError(ChartbriefError):
    """Parsing produced no header row."""

    status_code = 400


class AnalysisServiceError(ChartbriefError):
    """The external analysis service could not be reached or replied unusably."""


class ResponseValidationError(ChartbriefError):
    """The analysis reply does not match the expected result shape."""
