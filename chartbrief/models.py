"""
Pydantic models for data structures used throughout the application.

These models define the schema for:
- Parsed CSV tables and upload validation verdicts
- The closed set of supported chart types
- Analysis results returned by the LLM (after validation)
- API request/response models
"""
from enum import Enum
from typing import List, Optional, Tuple, Union, Any
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


def _coerce_str(v: Any) -> str:
    """Coerce a scalar label to str (JSON replies may carry numbers)."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    return str(v)


class ParsedCSV(BaseModel):
    """Header row plus data rows. Rows are kept ragged, exactly as parsed."""
    model_config = ConfigDict(frozen=True)

    headers: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()


class ValidationResult(BaseModel):
    """Verdict of the upload admissibility check."""
    valid: bool
    error: Optional[str] = None


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    DOUGHNUT = "doughnut"
    POLAR_AREA = "polarArea"
    RADAR = "radar"


# ============================================================================
# Analysis result models
# ============================================================================

class Dataset(BaseModel):
    """A single Chart.js dataset."""
    model_config = ConfigDict(populate_by_name=True)

    label: str
    data: List[Union[StrictInt, StrictFloat]]
    background_color: Optional[Union[str, List[str]]] = Field(default=None, alias="backgroundColor")
    border_color: Optional[Union[str, List[str]]] = Field(default=None, alias="borderColor")
    border_width: Optional[float] = Field(default=None, alias="borderWidth")

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> Any:
        # Numbers become text; a missing or non-scalar label is rejected
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ChartConfiguration(BaseModel):
    labels: List[str]
    datasets: List[Dataset]

    @field_validator("labels", mode="before")
    @classmethod
    def coerce_labels(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_coerce_str(item) for item in v]
        return v


class AnalysisResult(BaseModel):
    """
    Chart recommendation and executive summary for one CSV upload.

    Only built by ``response_validator.validate_analysis_result``; never
    construct it straight from an LLM reply.
    """
    model_config = ConfigDict(populate_by_name=True)

    chart_type: ChartType = Field(alias="chartType")
    chart_config: ChartConfiguration = Field(alias="chartConfig")
    summary: str


# ============================================================================
# API Request/Response Models
# ============================================================================

class AnalyzeRequest(BaseModel):
    """
    Payload sent to ``POST /api/analyze``.

    ``csv_text`` is the full original text (not the prompt preview) and
    ``file_name`` the unsanitized original name. Both are optional at the
    model level so the endpoint can answer missing fields with a 400.
    """
    model_config = ConfigDict(populate_by_name=True)

    csv_text: Optional[str] = Field(default=None, alias="csvText")
    file_name: Optional[str] = Field(default=None, alias="fileName")


class AnalyzeResponse(BaseModel):
    success: bool
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None


class ChartTypeOption(BaseModel):
    value: ChartType
    label: str
    cartesian: bool


class ChartTypesResponse(BaseModel):
    chart_types: List[ChartTypeOption]
