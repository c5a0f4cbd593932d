"""
Prompt construction for CSV analysis.

Turns a parsed table into a bounded instruction for the LLM:
- The file name is sanitized before it is embedded (it is user-controlled)
- Only the first ``max_rows`` rows are shown, with a note when rows were cut
- The reply contract (JSON shape and allowed chart types) is spelled out

Only the prompt is truncated. The parsed table passed in is left untouched.
"""
import re

from chartbrief import config
from chartbrief.models import ParsedCSV
from chartbrief.services.chart_types import chart_type_values

_UNSAFE_FILE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._\-]")

RESPONSE_FORMAT_EXAMPLE = """{
  "chartType": "bar",
  "chartConfig": {
    "labels": ["Label1", "Label2"],
    "datasets": [
      {
        "label": "Dataset Name",
        "data": [10, 20],
        "backgroundColor": ["#6b7280", "#9ca3af", "#d1d5db"],
        "borderColor": ["#4b5563", "#6b7280", "#9ca3af"],
        "borderWidth": 1
      }
    ]
  },
  "summary": "Executive summary here..."
}"""


def sanitize_file_name(name: str, max_length: int = config.MAX_FILE_NAME_LENGTH) -> str:
    """Replace characters outside ``[A-Za-z0-9._-]`` with ``_`` and cap the length."""
    return _UNSAFE_FILE_NAME_CHARS.sub("_", name)[:max_length]


def build_csv_preview(csv: ParsedCSV, max_rows: int = config.MAX_PROMPT_ROWS) -> str:
    """Header line plus at most ``max_rows`` rows, comma-joined without re-quoting."""
    lines = [",".join(csv.headers)]
    lines.extend(",".join(row) for row in csv.rows[:max_rows])
    return "\n".join(lines)


def build_truncation_note(total_rows: int, max_rows: int = config.MAX_PROMPT_ROWS) -> str:
    if total_rows <= max_rows:
        return ""
    return (
        f"\n\nNote: This CSV contains {total_rows} total rows. "
        f"Only the first {max_rows} rows are shown above."
    )


def build_prompt(
    csv: ParsedCSV,
    file_name: str,
    max_rows: int = config.MAX_PROMPT_ROWS,
    max_file_name_length: int = config.MAX_FILE_NAME_LENGTH,
) -> str:
    """
    Build the analysis prompt for a parsed CSV file.

    Args:
        csv: Parsed table (headers and rows)
        file_name: Original, unsanitized file name
        max_rows: Maximum number of rows embedded in the preview (default: 50)
        max_file_name_length: Maximum length of the embedded file name

    Returns:
        Prompt text asking for a chart type, a Chart.js configuration and a summary
    """
    safe_name = sanitize_file_name(file_name, max_length=max_file_name_length)
    csv_preview = build_csv_preview(csv, max_rows=max_rows)
    truncation_note = build_truncation_note(len(csv.rows), max_rows=max_rows)
    chart_types = ", ".join(chart_type_values())

    prompt = f"""You are a data analyst. Analyze the following CSV data from a file named "{safe_name}" and provide:

1. The most appropriate chart type from: {chart_types}
2. A Chart.js chart configuration with labels and datasets
3. An executive summary of the data (2-3 paragraphs)

Respond with valid JSON in this exact format (no markdown code blocks):
{RESPONSE_FORMAT_EXAMPLE}

CSV Data:
{csv_preview}{truncation_note}

Requirements for the chart configuration:
- "chartType" must be exactly one of: {chart_types}
- Use a muted, professional color palette (grays, slate blues, muted teals)
- Ensure tooltips will work by providing properly structured data
- For pie/doughnut charts, use an array of colors matching the number of data points
- Choose the chart type that best represents the data relationships
- The summary should highlight key trends, outliers, and actionable insights"""

    return prompt
