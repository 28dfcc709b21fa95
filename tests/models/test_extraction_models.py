"""
Tests for request and response models.
"""

import pytest
from pydantic import ValidationError

from src.models.extraction_request import ExtractionCredentials, JobHandle, SubmitJobPayload, WebExtractionRequest
from src.models.extraction_response import ExtractionResult, JobStatus, JobStatusResponse, SubmitJobResponse


class TestRequestModels:
    def test_payload_wraps_url_in_list(self):
        payload = SubmitJobPayload.from_request(WebExtractionRequest(url="https://a.example", question="Q?"))
        assert payload.model_dump() == {"urls": ["https://a.example"], "prompt": "Q?"}

    def test_credentials_hide_key(self):
        credentials = ExtractionCredentials(api_key="fc-secret")
        assert credentials.bearer_header() == "Bearer fc-secret"
        assert "fc-secret" not in repr(credentials)
        assert credentials.is_configured

    def test_job_handle_requires_id(self):
        with pytest.raises(ValidationError):
            JobHandle(id="")


class TestResponseModels:
    def test_submit_response_ignores_unknown_fields(self):
        response = SubmitJobResponse.model_validate({"success": True, "id": "job1", "urlTrace": []})
        assert response.id == "job1"
        assert not response.completed_immediately

    def test_completed_immediately_needs_data(self):
        assert SubmitJobResponse(success=True, data={"a": 1}).completed_immediately
        assert not SubmitJobResponse(success=True).completed_immediately
        assert not SubmitJobResponse(success=False, data={"a": 1}).completed_immediately

    def test_job_status_parsing(self):
        assert JobStatusResponse(status="completed").job_status is JobStatus.COMPLETED
        assert JobStatusResponse(status="queued").job_status is None

    def test_successful_result_requires_data(self):
        with pytest.raises(ValidationError):
            ExtractionResult(success=True, data=None, message="done")

    def test_falsy_data_is_allowed(self):
        result = ExtractionResult(success=True, data={}, message="done", elapsed_seconds=1)
        assert result.data == {}

    def test_status_response_tolerates_loose_types(self):
        response = JobStatusResponse.model_validate({"status": 5, "success": None, "error": {"code": "E42"}})

        assert response.job_status is None
        assert response.success is False
        assert response.error == "{'code': 'E42'}"

    def test_missing_status_is_unrecognised(self):
        assert JobStatusResponse.model_validate({}).job_status is None

    @pytest.mark.parametrize("raw_id,expected", [("job1", "job1"), (123, "123"), ("", None), ({"id": 1}, None), (True, None)])
    def test_submit_response_job_id_coercion(self, raw_id, expected):
        assert SubmitJobResponse.model_validate({"success": True, "id": raw_id}).id == expected
