"""Web extraction API client interface."""

from typing import Protocol, runtime_checkable
from abc import ABC, abstractmethod

from src.models.extraction_request import ExtractionCredentials, JobHandle, WebExtractionRequest
from src.models.extraction_response import ExtractionResult, JobStatusResponse, SubmitJobResponse


@runtime_checkable
class WebExtractionClient(Protocol):
    """Protocol for web page extraction operations."""

    def extract(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> ExtractionResult:
        """
        Extract information from a web page and wait for the result.

        Args:
            request: Page URL and question
            credentials: API credentials

        Returns:
            Extraction result

        Raises:
            DomainError: If extraction cannot be completed
        """
        ...

    def submit_job(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> SubmitJobResponse:
        """
        Create an extraction job.

        Args:
            request: Page URL and question
            credentials: API credentials

        Returns:
            Parsed creation response

        Raises:
            SubmissionError: If the API rejects the job
        """
        ...

    def check_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> JobStatusResponse:
        """
        Check status of extraction job.

        Args:
            job: Job handle
            credentials: API credentials

        Returns:
            Job status information

        Raises:
            StatusCheckError: If status check fails
        """
        ...

    def poll_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> ExtractionResult:
        """
        Poll job status until a terminal state or the attempt ceiling.

        Args:
            job: Job handle
            credentials: API credentials

        Returns:
            Extraction result of the completed job

        Raises:
            ExtractionJobError: If the job fails, is cancelled or times out
        """
        ...


class AbstractWebExtractionClient(ABC):
    """Abstract base class for web extraction clients."""

    @abstractmethod
    def extract(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> ExtractionResult:
        """Extract information from a web page."""
        pass

    @abstractmethod
    def submit_job(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> SubmitJobResponse:
        """Create an extraction job."""
        pass

    @abstractmethod
    def check_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> JobStatusResponse:
        """Check status of extraction job."""
        pass

    @abstractmethod
    def poll_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> ExtractionResult:
        """Poll job status until completion."""
        pass
