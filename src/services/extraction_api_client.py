"""HTTP client for the web page extraction API."""

import time
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from src.interfaces.extraction_client import AbstractWebExtractionClient
from src.models.extraction_request import ExtractionCredentials, JobHandle, SubmitJobPayload, WebExtractionRequest
from src.models.extraction_response import ExtractionResult, JobStatus, JobStatusResponse, SubmitJobResponse
from src.exceptions.domain_exceptions import (
    ConfigurationError,
    ExtractionCancelledError,
    ExtractionFailedError,
    ExtractionTimeoutError,
    InvalidArgumentError,
    NetworkError,
    ProtocolError,
    StatusCheckError,
    SubmissionError,
)
from lib.logger import Logger

logger = Logger.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.firecrawl.dev/v1"
DEFAULT_POLL_INTERVAL_SECONDS = 1.0
DEFAULT_MAX_POLL_ATTEMPTS = 300
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

NETWORK_ERROR_MESSAGE = "Network error occurred. Please check your internet connection and try again."

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class WebExtractionApiClient(AbstractWebExtractionClient):
    """Submits web page extraction jobs and polls them to completion.

    The instance holds configuration only; job ids and attempt counters live
    in the call, so one client can serve concurrent extractions.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        logger_instance: Optional[Logger] = None,
    ):
        """
        Initialize web extraction API client.

        Args:
            base_url: Base URL of the extraction API
            poll_interval_seconds: Wait before each status check
            max_poll_attempts: Status checks allowed before timing out
            timeout: Per-request timeout in seconds
            sleep: Suspension function used between status checks
            logger_instance: Optional logger for dependency injection
        """
        if not base_url:
            raise ConfigurationError(message="Extraction API base URL is not configured", config_key="base_url")
        if max_poll_attempts < 1:
            raise ConfigurationError(
                message="max_poll_attempts must be at least 1", config_key="max_poll_attempts"
            )

        self.base_url = base_url.rstrip("/")
        self.poll_interval_seconds = poll_interval_seconds
        self.max_poll_attempts = max_poll_attempts
        self.timeout = timeout
        self._sleep = sleep
        self.logger = logger_instance or logger

    def _get_headers(self, credentials: ExtractionCredentials, with_body: bool = False) -> Dict[str, str]:
        """Get HTTP headers for API requests."""
        headers = {"Authorization": credentials.bearer_header()}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def extract(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> ExtractionResult:
        """
        Extract information from a web page, waiting for the remote job to finish.

        Args:
            request: Page URL and question
            credentials: API credentials

        Returns:
            Successful extraction result

        Raises:
            ConfigurationError: If the API key is missing
            InvalidArgumentError: If url or question is missing
            NetworkError: If the API cannot be reached
            ExtractionApiError: If the API rejects a call or answers malformed data
            ExtractionJobError: If the job fails, is cancelled or times out
        """
        if not credentials.is_configured:
            raise ConfigurationError(message="Extraction API key is required", config_key="api_key")

        missing = [name for name in ("url", "question") if not getattr(request, name).strip()]
        if missing:
            raise InvalidArgumentError(
                message="Both URL and question are required parameters.", field_name=missing[0]
            )

        try:
            submitted = self.submit_job(request, credentials)

            if submitted.completed_immediately:
                self.logger.info("Extraction completed without polling", page_url=request.url)
                return ExtractionResult(
                    success=True, data=submitted.data, message="Extraction completed immediately."
                )

            if not submitted.id:
                raise ProtocolError(message="No job id received from extraction API")

            return self.poll_job_status(JobHandle(id=submitted.id), credentials)

        except requests.RequestException as e:
            self.logger.error(
                "Extraction API request network error",
                error_type=type(e).__name__,
                error_message=str(e),
                page_url=request.url,
            )
            raise NetworkError(message=NETWORK_ERROR_MESSAGE, context={"error_type": type(e).__name__}, cause=e) from e

    def submit_job(self, request: WebExtractionRequest, credentials: ExtractionCredentials) -> SubmitJobResponse:
        """
        Create an extraction job.

        Args:
            request: Page URL and question
            credentials: API credentials

        Returns:
            Parsed creation response

        Raises:
            SubmissionError: If the API answers with a non-success status
            ProtocolError: If the success body cannot be parsed
        """
        url = f"{self.base_url}/extract"
        payload = SubmitJobPayload.from_request(request)

        log_context: dict[str, Any] = {
            "service": "web_extraction_api_client",
            "operation": "submit_job",
            "endpoint": url,
            "page_url": request.url,
        }

        self.logger.info("Submitting extraction job", **log_context)
        response = requests.post(
            url, json=payload.model_dump(), headers=self._get_headers(credentials, with_body=True), timeout=self.timeout
        )

        if not _is_success(response):
            vendor_message = _vendor_error_message(response)
            self.logger.error(
                "Extraction job submission failed", status_code=response.status_code, error_message=vendor_message, **log_context
            )
            raise SubmissionError(
                message=f"Failed to start extraction: {response.status_code} - {vendor_message}",
                status_code=response.status_code,
                vendor_message=vendor_message,
            )

        submitted = _parse_body(response, SubmitJobResponse)
        self.logger.info(
            "Extraction job submitted", status_code=response.status_code, job_id=submitted.id, **log_context
        )
        return submitted

    def check_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> JobStatusResponse:
        """
        Check status of extraction job.

        Args:
            job: Job handle
            credentials: API credentials

        Returns:
            Job status information

        Raises:
            StatusCheckError: If the API answers with a non-success status
            ProtocolError: If the success body cannot be parsed
        """
        url = f"{self.base_url}/extract/{job.id}"
        log_context: dict[str, Any] = {
            "service": "web_extraction_api_client",
            "operation": "check_job_status",
            "job_id": job.id,
            "endpoint": url,
        }

        response = requests.get(url, headers=self._get_headers(credentials), timeout=self.timeout)

        if not _is_success(response):
            vendor_message = _vendor_error_message(response)
            self.logger.error(
                "Job status check failed", status_code=response.status_code, error_message=vendor_message, **log_context
            )
            raise StatusCheckError(
                message=f"Failed to check extraction status: {response.status_code} - {vendor_message}",
                context={"job_id": job.id},
                status_code=response.status_code,
                vendor_message=vendor_message,
            )

        status_data = _parse_body(response, JobStatusResponse)
        job_status = status_data.status if status_data.status is not None else "unknown"
        self.logger.debug("Job status check successful", job_status=job_status, **log_context)
        return status_data

    def poll_job_status(self, job: JobHandle, credentials: ExtractionCredentials) -> ExtractionResult:
        """
        Poll job status until a terminal state or the attempt ceiling.

        Each attempt waits ``poll_interval_seconds`` before querying.

        Args:
            job: Job handle
            credentials: API credentials

        Returns:
            Extraction result of the completed job

        Raises:
            ExtractionFailedError: If the job failed
            ExtractionCancelledError: If the job was cancelled
            ExtractionTimeoutError: If no terminal state was seen in time
        """
        log_context: dict[str, Any] = {
            "service": "web_extraction_api_client",
            "operation": "poll_job_status",
            "job_id": job.id,
            "poll_interval": self.poll_interval_seconds,
            "max_polls": self.max_poll_attempts,
        }
        self.logger.info("Starting job status polling", **log_context)

        for attempt in range(1, self.max_poll_attempts + 1):
            self._sleep(self.poll_interval_seconds)

            status_data = self.check_job_status(job, credentials)
            job_status = status_data.job_status
            poll_context = {**log_context, "attempt": attempt, "job_status": status_data.status}

            if job_status is JobStatus.COMPLETED and status_data.success:
                if status_data.data is None:
                    raise ProtocolError(message="Completed extraction job returned no data", context={"job_id": job.id})
                self.logger.info("Job completed successfully", **poll_context)
                return ExtractionResult(
                    success=True,
                    data=status_data.data,
                    message=f"Information extracted successfully from the web page after {attempt} polling attempts.",
                    elapsed_seconds=attempt,
                )

            if job_status is JobStatus.FAILED or job_status is JobStatus.COMPLETED:
                self.logger.error("Job failed with terminal status", error_message=status_data.error, **poll_context)
                raise ExtractionFailedError(
                    message=f"Extraction failed: {status_data.error or 'Unknown error occurred during extraction'}",
                    job_id=job.id,
                    attempts=attempt,
                )

            if job_status is JobStatus.CANCELLED:
                self.logger.warning("Job was cancelled remotely", **poll_context)
                raise ExtractionCancelledError(message="Extraction was cancelled", job_id=job.id, attempts=attempt)

            if job_status is None:
                # Unknown values are treated as still running
                self.logger.warning("Unrecognised job status, continuing to poll", **poll_context)
            else:
                self.logger.debug("Job still processing, continuing to poll", **poll_context)

        self.logger.error("Job polling timeout reached", attempts=self.max_poll_attempts, **log_context)
        raise ExtractionTimeoutError(
            message=(
                f"Extraction timed out after {self.max_poll_attempts} polling attempts. "
                "The job may still be processing - please try again later."
            ),
            job_id=job.id,
            attempts=self.max_poll_attempts,
        )


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _vendor_error_message(response: requests.Response) -> str:
    """Vendor-supplied error text, falling back to the HTTP reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason or ""


def _parse_body(response: requests.Response, model: Type[ResponseModel]) -> ResponseModel:
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        # requests raises its JSONDecodeError as a ValueError subclass
        raise ProtocolError(
            message=f"Malformed response from extraction API: {str(e)}",
            status_code=response.status_code,
            cause=e,
        ) from e
