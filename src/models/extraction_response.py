# Copyright 2025 by Enverus. All rights reserved.

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class JobStatus(str, Enum):
    """Status values reported by the extraction API."""

    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    PROCESSING = "processing"
    PENDING = "pending"


class VendorResponse(BaseModel):
    """Fields shared by extraction API bodies.

    Vendor bodies are loosely typed; values of an unexpected type are coerced
    rather than rejected so that only a missing job id or an unreadable body
    is a protocol failure.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool = Field(False, description="Whether the API reports success")
    data: Any = Field(None, description="Extracted payload")
    error: Optional[str] = Field(None, description="Vendor error message")

    @field_validator("success", mode="before")
    @classmethod
    def coerce_success(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("error", mode="before")
    @classmethod
    def coerce_error(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return str(v)


class SubmitJobResponse(VendorResponse):
    """Body returned by the job creation call."""

    id: Optional[str] = Field(None, description="Job identifier to poll")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Optional[str]:
        if isinstance(v, bool):
            return None
        if isinstance(v, (str, int)):
            return str(v) or None
        return None

    @property
    def completed_immediately(self) -> bool:
        return self.success and self.data is not None and not self.id


class JobStatusResponse(VendorResponse):
    """Body returned by the job status call."""

    status: Any = Field(None, description="Raw job status value")

    @property
    def job_status(self) -> Optional[JobStatus]:
        """Recognised status, or None for values outside the known set."""
        if not isinstance(self.status, str):
            return None
        try:
            return JobStatus(self.status)
        except ValueError:
            return None


class ExtractionResult(BaseModel):
    """Outcome of a successful web page extraction."""

    success: bool = Field(..., description="Overall success status")
    data: Any = Field(None, description="Structured data extracted from the page")
    message: str = Field(..., description="Human-readable summary")
    elapsed_seconds: Optional[int] = Field(None, description="Polling attempts made before completion")

    @model_validator(mode="after")
    def check_data_present(self) -> "ExtractionResult":
        if self.success and self.data is None:
            raise ValueError("a successful extraction result must carry data")
        return self
