# Copyright 2025 by Enverus. All rights reserved.

from typing import List

from pydantic import BaseModel, ConfigDict, Field, SecretStr

"""Web Extraction Request Models"""


class WebExtractionRequest(BaseModel):
    """A page to fetch and the question to answer about it.

    Emptiness is checked by the client so that missing values surface as
    ``InvalidArgumentError`` rather than a pydantic validation error.
    """

    url: str = Field("", description="URL of the web page to extract information from.")
    question: str = Field("", description="Natural-language question to answer from the page content.")


class ExtractionCredentials(BaseModel):
    api_key: SecretStr = Field(SecretStr(""), description="Bearer token for the extraction API.")

    def bearer_header(self) -> str:
        return f"Bearer {self.api_key.get_secret_value()}"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key.get_secret_value().strip())


"""Those models define the wire format of the extraction API job creation call."""


class SubmitJobPayload(BaseModel):
    urls: List[str] = Field(..., min_length=1, description="Pages to extract from; always a single URL here.")
    prompt: str = Field(..., description="Extraction prompt sent to the API.")

    @classmethod
    def from_request(cls, request: WebExtractionRequest) -> "SubmitJobPayload":
        return cls(urls=[request.url], prompt=request.question)


class JobHandle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Identifier of the remote extraction job.")
