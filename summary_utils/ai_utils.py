import logging
import random
import time
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import requests

from summary_utils.config_utils import API_KEY_NAME, Settings, load_settings
from summary_utils.errors import MalformedResponseError
from summary_utils.input_utils import SummaryRequest
from summary_utils.retry_utils import (
    Completed,
    Errored,
    Fail,
    Outcome,
    Rejected,
    Succeed,
    decide_next_action,
)

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert academic research assistant. Your task is to analyze the provided content "
    "(which may be raw text or a PDF file's content) and generate a comprehensive, structured summary "
    "based on the user's specific focus instructions. Ensure the output is accurate and easy to "
    "understand. Please output the summary in a professional markdown format."
)
DEFAULT_QUERY = "Provide a detailed summary of the main findings and methodology."


def build_payload(request: SummaryRequest) -> Dict[str, Any]:
    query = request.focus_instruction.strip() or DEFAULT_QUERY

    if request.file_content is not None:
        parts = [
            {"text": f"Analyze this PDF file thoroughly. The main instruction is: {query}"},
            {
                "inlineData": {
                    "mimeType": request.file_content.mime_type,
                    "data": request.file_content.to_base64(),
                }
            },
        ]
    else:
        parts = [
            {
                "text": (
                    "Content to summarize: \n\n---START CONTENT---\n"
                    f"{request.text_content}\n---END CONTENT---\n\n"
                    f"User Instruction: {query}"
                )
            }
        ]

    return {
        "contents": [{"parts": parts}],
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
    }


def extract_text(body: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise MalformedResponseError."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise MalformedResponseError()
    if not isinstance(text, str) or not text:
        raise MalformedResponseError()
    return text


class SummarizationClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        sleep: Callable[[float], None] = time.sleep,
        jitter: Callable[[], float] = random.random,
    ):
        self.settings = settings or load_settings()
        self._sleep = sleep
        self._jitter = jitter

    def _redact(self, message: str) -> str:
        # requests puts the full URL, key included, into its error messages
        key = self.settings.api_key
        if not key:
            return message
        return message.replace(key, "***").replace(quote(key, safe=""), "***")

    def _attempt(self, payload: Dict[str, Any]) -> Outcome:
        try:
            response = requests.post(
                self.settings.endpoint,
                params={"key": self.settings.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            if not 200 <= response.status_code < 300:
                return Rejected(response.status_code)
            return Completed(extract_text(response.json()))
        except Exception as e:
            return Errored(self._redact(str(e)) or type(e).__name__)

    def run(self, request: SummaryRequest, on_attempt: Optional[Callable[[int], None]] = None):
        """
        Call the API with bounded retries.

        Returns Succeed(text) or Fail(message). on_attempt receives the
        1-based attempt number before each HTTP call.
        """
        if not self.settings.api_key:
            message = f"Missing Gemini API key. Set {API_KEY_NAME} in the environment or st.secrets."
            logger.error(message)
            return Fail(f"Error: {message}")

        payload = build_payload(request)
        max_attempts = self.settings.max_attempts

        for attempt in range(max_attempts):
            if on_attempt is not None:
                on_attempt(attempt + 1)

            outcome = self._attempt(payload)
            action = decide_next_action(attempt, outcome, max_attempts=max_attempts, jitter=self._jitter)

            if isinstance(action, Succeed):
                return action
            if isinstance(action, Fail):
                logger.error(action.message)
                return action

            if isinstance(outcome, Rejected) and outcome.throttled:
                logger.warning(f"Attempt {attempt + 1} rate limited by {self.settings.endpoint}")
            else:
                logger.warning(f"Attempt {attempt + 1} failed: {outcome.message}")
            self._sleep(action.delay_ms / 1000)

        # only reachable with max_attempts < 1
        return Fail("Error: Summarization logic failed to execute.")

    def summarize(self, request: SummaryRequest, on_attempt: Optional[Callable[[int], None]] = None) -> str:
        result = self.run(request, on_attempt=on_attempt)
        return result.text if isinstance(result, Succeed) else result.message


def summarize(request: SummaryRequest, settings: Optional[Settings] = None) -> str:
    return SummarizationClient(settings=settings).summarize(request)
