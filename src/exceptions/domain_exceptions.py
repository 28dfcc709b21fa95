"""Domain-specific exceptions for web page extraction."""

from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass
class DomainError(Exception):
    """Base domain exception."""

    message: str
    context: Optional[Dict[str, Any]] = None
    cause: Optional[Exception] = None

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


@dataclass
class ConfigurationError(DomainError):
    """Required configuration, such as the API key, is missing."""

    config_key: Optional[str] = None


@dataclass
class InvalidArgumentError(DomainError):
    """Input validation error."""

    field_name: Optional[str] = None


@dataclass
class ExtractionApiError(DomainError):
    """The extraction API answered in a way we cannot use."""

    status_code: Optional[int] = None
    vendor_message: Optional[str] = None


@dataclass
class SubmissionError(ExtractionApiError):
    """Creating the extraction job was rejected."""

    pass


@dataclass
class StatusCheckError(ExtractionApiError):
    """Reading the status of an extraction job was rejected."""

    pass


@dataclass
class ProtocolError(ExtractionApiError):
    """A successful response was malformed."""

    pass


@dataclass
class ExtractionJobError(DomainError):
    """The remote extraction job reached an unsuccessful outcome."""

    job_id: Optional[str] = None
    attempts: Optional[int] = None


@dataclass
class ExtractionFailedError(ExtractionJobError):
    """Job reported failure."""

    pass


@dataclass
class ExtractionCancelledError(ExtractionJobError):
    """Job was cancelled remotely."""

    pass


@dataclass
class ExtractionTimeoutError(ExtractionJobError):
    """Job did not reach a terminal state within the attempt ceiling."""

    pass


@dataclass
class NetworkError(DomainError):
    """Transport-level failure talking to the extraction API."""

    pass
