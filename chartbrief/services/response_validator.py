"""
Validation of analysis replies.

The LLM reply is loosely-typed JSON. ``validate_analysis_result`` is the only
way to turn it into an ``AnalysisResult``; anything that fails a check is
rejected as a whole.
"""
from typing import Any, Mapping

from pydantic import ValidationError

from chartbrief.exceptions import ResponseValidationError
from chartbrief.models import AnalysisResult
from chartbrief.services.chart_types import chart_type_values, is_valid_chart_type


def validate_analysis_result(candidate: Any) -> AnalysisResult:
    """
    Check the shape of an analysis reply and build an ``AnalysisResult``.

    Required:
    - ``chartType`` is one of the supported chart types
    - ``chartConfig.labels`` and ``chartConfig.datasets`` are lists
    - ``summary`` is a string

    Raises:
        ResponseValidationError: with a human-readable reason on any failure
    """
    if not isinstance(candidate, Mapping):
        raise ResponseValidationError("Analysis response is not a JSON object")

    chart_type = candidate.get("chartType")
    if not is_valid_chart_type(chart_type):
        raise ResponseValidationError(
            f"Invalid chart type: {chart_type!r} (expected one of {', '.join(chart_type_values())})"
        )

    chart_config = candidate.get("chartConfig")
    if not isinstance(chart_config, Mapping):
        raise ResponseValidationError("Analysis response is missing chartConfig")

    if not isinstance(chart_config.get("labels"), list):
        raise ResponseValidationError("chartConfig.labels must be a list")

    if not isinstance(chart_config.get("datasets"), list):
        raise ResponseValidationError("chartConfig.datasets must be a list")

    if not isinstance(candidate.get("summary"), str):
        raise ResponseValidationError("summary must be a string")

    try:
        return AnalysisResult.model_validate(dict(candidate))
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ResponseValidationError(
            f"Invalid analysis response at {location}: {first.get('msg', 'invalid value')}"
        ) from e
