"""Shared test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from chartbrief.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def valid_reply():
    """A well-formed analysis reply as the LLM would return it."""
    return {
        "chartType": "bar",
        "chartConfig": {
            "labels": ["January", "February", "March"],
            "datasets": [
                {
                    "label": "Sales",
                    "data": [120, 85, 200],
                    "backgroundColor": "rgba(59,130,246,0.6)",
                    "borderColor": "rgba(59,130,246,1)",
                    "borderWidth": 1,
                }
            ],
        },
        "summary": "Sales peaked in March.",
    }


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def completion():
    """Wrap reply text in an OpenAI-compatible chat completion body."""
    return _completion
