import logging

import requests

from config import COMPLETION_URL, LLM_MODEL, MAX_TOKENS
from errors import ApiError


logger = logging.getLogger(__name__)



def _error_body(response):
    try:
        return response.json()
    except ValueError:
        return response.text



def call_chat_completion(messages, credential: str, model: str = None, max_tokens: int = MAX_TOKENS,
                         url: str = None, session=None) -> str:
    """
    Posts `messages` to the chat completions endpoint and returns the content
    of the first choice.

    Every failure comes back as ApiError: transport errors, non-2xx
    statuses (with the parsed or raw error body) and success bodies that
    do not have the expected shape.
    """
    http = session or requests
    payload = {
        "model": model or LLM_MODEL,
        "messages": messages,
        "max_tokens": max_tokens,
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {credential}",
    }

    try:
        response = http.post(url or COMPLETION_URL, headers=headers, json=payload)
    except (requests.RequestException, ValueError) as e:
        logger.error("Completion request failed: %s", e)
        raise ApiError(str(e)) from e

    if not 200 <= response.status_code < 300:
        error = ApiError.from_response(response.status_code, _error_body(response))
        logger.error("Completion API returned %s", response.status_code)
        raise error

    try:
        data = response.json()
        content = data["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            raise TypeError(f"message content is {type(content).__name__}, not text")
        return content
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error("Unexpected completion response: %r", e)
        raise ApiError(f"Could not read completion response: {e}", status=response.status_code) from e
