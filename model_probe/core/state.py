"""Typed results for model availability probes."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProbeResult(BaseModel):
    """Outcome of one probe against one candidate model id."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, protected_namespaces=())

    model_id: str = Field(..., alias="modelId", min_length=1)
    available: bool
    response_time: int = Field(..., alias="responseTime", ge=0)  # milliseconds
    error_type: Optional[str] = Field(None, alias="errorType")
    error_message: Optional[str] = Field(None, alias="errorMessage")

    @model_validator(mode="after")
    def _check_error_fields(self) -> "ProbeResult":
        has_error = self.error_type is not None or self.error_message is not None
        if self.available and has_error:
            raise ValueError("an available result cannot carry error details")
        if not self.available and (self.error_type is None or self.error_message is None):
            raise ValueError("an unavailable result needs errorType and errorMessage")
        return self

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict with absent error fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProbeSummary(BaseModel):
    """Counts derived from a result list."""
    total: int = Field(ge=0)
    available: int = Field(ge=0)
    unavailable: int = Field(ge=0)


class AvailableModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_id: str = Field(..., alias="modelId")
    response_time: int = Field(..., alias="responseTime")


class UnavailableModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_id: str = Field(..., alias="modelId")
    error_type: str = Field(..., alias="errorType")
    error_message: str = Field(..., alias="errorMessage")


class ProbeReport(BaseModel):
    """Structured payload returned by the HTTP service and `--format json`."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    summary: ProbeSummary
    available_models: List[AvailableModel] = Field(..., alias="availableModels")
    unavailable_models: List[UnavailableModel] = Field(..., alias="unavailableModels")
    all_results: List[ProbeResult] = Field(..., alias="allResults")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ConfigErrorResponse(BaseModel):
    """Error body returned when no credential is configured."""
    error: str
    message: str
