"""Unit tests for upload admissibility checks."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from chartbrief.services.file_validator import has_csv_extension, validate_file

MB3 = 3 * 1024 * 1024


class TestValidateFile:

    def test_accepts_csv_with_csv_type(self):
        result = validate_file("data.csv", "text/csv", 1024)
        assert result.valid is True
        assert result.error is None

    @pytest.mark.parametrize("name", ["data.CSV", "Data.Csv", "DATA.csv"])
    def test_extension_is_case_insensitive(self, name):
        assert validate_file(name, "text/csv", 0).valid is True

    @pytest.mark.parametrize("media_type", ["text/csv", "application/vnd.ms-excel", "text/plain"])
    def test_allowed_media_types(self, media_type):
        assert validate_file("data.csv", media_type, 10).valid is True

    def test_empty_media_type_is_not_checked(self):
        assert validate_file("data.csv", "", 10).valid is True

    def test_rejects_wrong_extension(self):
        result = validate_file("data.txt", "text/plain", 10)
        assert result.valid is False
        assert result.error == "Please upload a CSV file."

    def test_rejects_double_extension(self):
        result = validate_file("data.csv.exe", "text/csv", 10)
        assert result.valid is False
        assert result.error == "Please upload a CSV file."

    def test_rejects_disallowed_media_type_with_same_message(self):
        result = validate_file("data.csv", "application/json", 10)
        assert result.valid is False
        assert result.error == "Please upload a CSV file."

    def test_size_limit_is_inclusive(self):
        assert validate_file("data.csv", "text/csv", MB3).valid is True

    def test_rejects_one_byte_over_limit(self):
        result = validate_file("data.csv", "text/csv", MB3 + 1)
        assert result.valid is False
        assert result.error == "File must be 3MB or less."

    def test_extension_checked_before_size(self):
        result = validate_file("big.xlsx", "", MB3 * 10)
        assert result.error == "Please upload a CSV file."

    def test_limits_can_be_overridden(self):
        result = validate_file("data.csv", "text/tab-separated-values", 11,
                               max_size_bytes=10, allowed_mime_types=("text/tab-separated-values",))
        assert result.valid is False
        assert result.error == "File must be 3MB or less."


class TestHasCsvExtension:

    def test_plain_name(self):
        assert has_csv_extension("x.csv")

    def test_no_extension(self):
        assert not has_csv_extension("csv")
