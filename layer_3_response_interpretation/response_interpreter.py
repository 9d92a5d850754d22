"""
Response interpretation for generated email templates

Sends the prompt to Gemini and turns the reply into EmailTemplate objects.
Transport failures and malformed replies both end up as a user-facing
error string on the GenerationResult; nothing is retried.
"""
import json
import re
from typing import Any, Dict, List, Optional

from config.settings import settings
from models.email_template import EmailTemplate, GenerationResult, ResponseFormatError
from utils.llm_client import LLMClient
from utils.logger import get_logger

logger = get_logger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse the AI response. Please try again."

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Pull the JSON object out of a model reply

    Tries the whole reply first (JSON mode returns a bare object), then the
    span from the first "{" to the last "}".

    Args:
        text: Raw model reply

    Returns:
        Parsed JSON object

    Raises:
        ResponseFormatError: if no JSON object can be parsed
    """
    cleaned = (text or "").strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        # Markdown code fences around the payload
        fence_match = _FENCE_PATTERN.search(cleaned)
        if fence_match:
            cleaned = fence_match.group(1)

        span = _OBJECT_PATTERN.search(cleaned)
        if not span:
            raise ResponseFormatError("No JSON object found in model response")
        try:
            data = json.loads(span.group(0))
        except json.JSONDecodeError as e:
            raise ResponseFormatError(f"Invalid JSON in model response: {e}") from e

    if not isinstance(data, dict):
        raise ResponseFormatError(f"Expected a JSON object, got {type(data).__name__}")

    return data


def parse_templates(data: Dict[str, Any], expected_count: Optional[int] = None) -> List[EmailTemplate]:
    """
    Validate the "templates" array of a parsed reply

    Args:
        data: Parsed JSON object
        expected_count: Exact number of templates required (None to accept any non-empty list)

    Returns:
        Templates in the order the model returned them

    Raises:
        ResponseFormatError: if the array is missing, has the wrong size or holds bad entries
    """
    raw_templates = data.get("templates")
    if not isinstance(raw_templates, list):
        raise ResponseFormatError("Response is missing a 'templates' array")

    if expected_count is not None and len(raw_templates) != expected_count:
        raise ResponseFormatError(
            f"Expected {expected_count} templates, got {len(raw_templates)}"
        )
    if not raw_templates:
        raise ResponseFormatError("Response contains no templates")

    return [EmailTemplate.from_dict(entry) for entry in raw_templates]


class ResponseInterpreter:
    """Call the model and interpret its reply as email templates"""

    def __init__(self, llm_client: Optional[LLMClient] = None,
                 expected_count: Optional[int] = settings.TEMPLATE_COUNT):
        """
        Initialize response interpreter

        Args:
            llm_client: LLM client instance (created on first use if not provided)
            expected_count: Number of templates a valid reply must contain
        """
        self._llm_client = llm_client
        self.expected_count = expected_count

    @property
    def llm_client(self) -> LLMClient:
        # Created lazily so a missing API key surfaces as a request error
        if self._llm_client is None:
            self._llm_client = LLMClient()
        return self._llm_client

    def generate(self, prompt: str) -> GenerationResult:
        """
        Generate email templates for a prompt

        Args:
            prompt: Prompt from the prompt builder

        Returns:
            GenerationResult with either templates or an error message
        """
        try:
            response_text = self.llm_client.generate(prompt)
        except Exception as e:
            logger.error(f"Gemini request failed: {e}", exc_info=True)
            return GenerationResult(error=f"Error: {e}")

        try:
            data = extract_json_object(response_text)
            templates = parse_templates(data, self.expected_count)
        except ResponseFormatError as e:
            logger.error(f"Error parsing response: {e}")
            logger.debug(f"Raw model response: {response_text}")
            return GenerationResult(error=PARSE_ERROR_MESSAGE)

        logger.info(f"Parsed {len(templates)} email templates")
        return GenerationResult(templates=templates)
