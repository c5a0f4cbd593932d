"""Unit tests for analysis reply validation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import copy

import pytest

from chartbrief.exceptions import ResponseValidationError
from chartbrief.models import AnalysisResult, ChartType
from chartbrief.services.response_validator import validate_analysis_result


class TestAccepts:

    def test_valid_reply(self, valid_reply):
        result = validate_analysis_result(valid_reply)
        assert isinstance(result, AnalysisResult)
        assert result.chart_type is ChartType.BAR
        assert result.chart_config.labels == ["January", "February", "March"]
        assert result.chart_config.datasets[0].data == [120, 85, 200]
        assert result.summary == "Sales peaked in March."

    @pytest.mark.parametrize("chart_type", ["bar", "line", "pie", "doughnut", "polarArea", "radar"])
    def test_every_supported_chart_type(self, valid_reply, chart_type):
        valid_reply["chartType"] = chart_type
        assert validate_analysis_result(valid_reply).chart_type.value == chart_type

    def test_empty_lists_are_accepted(self, valid_reply):
        valid_reply["chartConfig"] = {"labels": [], "datasets": []}
        result = validate_analysis_result(valid_reply)
        assert result.chart_config.datasets == []

    def test_color_lists(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["backgroundColor"] = ["#111", "#222", "#333"]
        result = validate_analysis_result(valid_reply)
        assert result.chart_config.datasets[0].background_color == ["#111", "#222", "#333"]

    def test_numeric_labels_are_coerced(self, valid_reply):
        valid_reply["chartConfig"]["labels"] = [2021, 2022, 2023]
        result = validate_analysis_result(valid_reply)
        assert result.chart_config.labels == ["2021", "2022", "2023"]

    def test_numeric_dataset_label_is_coerced(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["label"] = 2024
        assert validate_analysis_result(valid_reply).chart_config.datasets[0].label == "2024"

    def test_float_data_points(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["data"] = [1.5, 2, 3.25]
        assert validate_analysis_result(valid_reply).chart_config.datasets[0].data == [1.5, 2, 3.25]

    def test_serializes_with_wire_names(self, valid_reply):
        dumped = validate_analysis_result(valid_reply).model_dump(mode="json", by_alias=True, exclude_none=True)
        assert dumped["chartType"] == "bar"
        assert dumped["chartConfig"]["datasets"][0]["borderWidth"] == 1


class TestRejects:

    def test_unknown_chart_type(self, valid_reply):
        valid_reply["chartType"] = "scatter"
        with pytest.raises(ResponseValidationError, match="Invalid chart type"):
            validate_analysis_result(valid_reply)

    def test_missing_chart_type(self, valid_reply):
        del valid_reply["chartType"]
        with pytest.raises(ResponseValidationError):
            validate_analysis_result(valid_reply)

    def test_missing_datasets(self, valid_reply):
        del valid_reply["chartConfig"]["datasets"]
        with pytest.raises(ResponseValidationError, match="datasets"):
            validate_analysis_result(valid_reply)

    def test_labels_not_a_list(self, valid_reply):
        valid_reply["chartConfig"]["labels"] = "January"
        with pytest.raises(ResponseValidationError, match="labels"):
            validate_analysis_result(valid_reply)

    def test_missing_chart_config(self, valid_reply):
        del valid_reply["chartConfig"]
        with pytest.raises(ResponseValidationError, match="chartConfig"):
            validate_analysis_result(valid_reply)

    def test_summary_not_a_string(self, valid_reply):
        valid_reply["summary"] = ["point one"]
        with pytest.raises(ResponseValidationError, match="summary"):
            validate_analysis_result(valid_reply)

    def test_not_an_object(self):
        with pytest.raises(ResponseValidationError):
            validate_analysis_result([1, 2, 3])

    def test_non_numeric_data(self, valid_reply):
        bad = copy.deepcopy(valid_reply)
        bad["chartConfig"]["datasets"][0]["data"] = ["lots"]
        with pytest.raises(ResponseValidationError, match="chartConfig"):
            validate_analysis_result(bad)

    def test_missing_dataset_label(self, valid_reply):
        del valid_reply["chartConfig"]["datasets"][0]["label"]
        with pytest.raises(ResponseValidationError, match=r"datasets\.0\.label"):
            validate_analysis_result(valid_reply)

    def test_null_dataset_label(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["label"] = None
        with pytest.raises(ResponseValidationError, match=r"datasets\.0\.label"):
            validate_analysis_result(valid_reply)

    def test_boolean_data_points(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["data"] = [True, False]
        with pytest.raises(ResponseValidationError, match=r"datasets\.0\.data\.0"):
            validate_analysis_result(valid_reply)

    def test_numeric_strings_in_data(self, valid_reply):
        valid_reply["chartConfig"]["datasets"][0]["data"] = ["10", "20"]
        with pytest.raises(ResponseValidationError, match=r"datasets\.0\.data\.0"):
            validate_analysis_result(valid_reply)
