"""
LLM integration for CSV analysis using the OpenRouter API.

This module:
- Calls OpenRouter (OpenAI-compatible chat completions) with the built prompt
- Extracts the JSON object from the reply text (raw or fenced in markdown)
- Hands the decoded object to the response validator

A call is made exactly once per analysis: no retries, caching or backoff.
Every failure is raised as ``AnalysisServiceError`` for the API to report.
"""
import json
import logging
import re
from typing import Any, Dict, Optional

import requests

from chartbrief.config import (
    LLM_API_URL, LLM_API_KEY, LLM_MODEL, LLM_MAX_TOKENS, LLM_TEMPERATURE,
    LLM_TIMEOUT, DISABLE_SSL_VERIFY,
)
from chartbrief.exceptions import AnalysisServiceError
from chartbrief.models import AnalysisResult
from chartbrief.services.response_validator import validate_analysis_result

logger = logging.getLogger(__name__)

_CODE_BLOCK = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?\s*```")


def call_llm_api(prompt: str, model: Optional[str] = None) -> Dict[str, Any]:
    """
    HTTP call to the OpenRouter chat completions endpoint.

    Args:
        prompt: The prompt text to send to the LLM
        model: Optional model id (defaults to OPENROUTER_MODEL from config)

    Returns:
        Decoded JSON body of the chat completion

    Raises:
        AnalysisServiceError: if the API is not configured, unreachable,
            returns an HTTP error, or returns a non-JSON body
    """
    if not LLM_API_KEY:
        raise AnalysisServiceError("OPENROUTER_API_KEY is not configured")

    if not LLM_API_URL:
        raise AnalysisServiceError("OPENROUTER_API_URL is not configured")

    headers = {
        "Authorization": f"Bearer {LLM_API_KEY}",
        "Content-Type": "application/json",
    }

    payload = {
        "model": model or LLM_MODEL,
        "messages": [
            {
                "role": "user",
                "content": prompt,
            }
        ],
        "temperature": LLM_TEMPERATURE,
        "max_tokens": LLM_MAX_TOKENS,
    }

    try:
        response = requests.post(
            LLM_API_URL,
            headers=headers,
            json=payload,
            timeout=LLM_TIMEOUT,
            verify=not DISABLE_SSL_VERIFY,
        )
        response.raise_for_status()
        result = response.json()

    except requests.exceptions.Timeout as e:
        logger.error("OpenRouter API request timed out after %ss", LLM_TIMEOUT)
        raise AnalysisServiceError("Analysis service timed out") from e

    except requests.exceptions.HTTPError as e:
        # Response.__bool__() is False for 4xx/5xx, so compare against None
        status_code = e.response.status_code if e.response is not None else 0
        try:
            err_body = e.response.json() if e.response is not None else {}
            err_msg = err_body.get("error", {}).get("message", str(e))
        except (ValueError, AttributeError):
            err_msg = str(e)
        logger.error("OpenRouter API returned HTTP %s: %s", status_code, err_msg)
        raise AnalysisServiceError(f"Analysis service error ({status_code}): {err_msg}") from e

    except ValueError as e:
        logger.error("Failed to parse OpenRouter API response as JSON")
        raise AnalysisServiceError("Analysis service returned an invalid response") from e

    except requests.exceptions.RequestException as e:
        logger.error("OpenRouter API request failed: %s", e)
        raise AnalysisServiceError("Analysis service request failed") from e

    logger.info("OpenRouter API call successful (model=%s)", payload["model"])
    return result


def extract_json(text: str) -> Any:
    """
    Decode the JSON object in an LLM reply.

    Tries the text as-is first, then the body of the first fenced code block.

    Raises:
        AnalysisServiceError: if no JSON can be decoded
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _CODE_BLOCK.search(text)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass

    raise AnalysisServiceError("Failed to parse analysis response as JSON")


def parse_llm_response(response: Dict[str, Any]) -> Any:
    """
    Pull the message content out of an OpenAI-compatible completion and decode it.

    Args:
        response: Raw response dictionary from the chat completions API

    Returns:
        The decoded (still unvalidated) JSON value
    """
    choices = response.get("choices") if isinstance(response, dict) else None
    if not choices:
        raise AnalysisServiceError("No choices in analysis response")

    message = choices[0].get("message") or {}
    content = message.get("content") or ""
    if not isinstance(content, str) or not content.strip():
        raise AnalysisServiceError("No text response from analysis service")

    return extract_json(content.strip())


def analyze_csv(prompt: str) -> AnalysisResult:
    """
    Run one analysis: call the LLM, decode the reply and validate it.

    Raises:
        AnalysisServiceError: transport or decoding failure
        ResponseValidationError: reply does not have the expected shape
    """
    api_response = call_llm_api(prompt)
    candidate = parse_llm_response(api_response)
    return validate_analysis_result(candidate)
