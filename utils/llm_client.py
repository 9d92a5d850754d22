"""
Gemini LLM client that writes the outreach email variations.
"""
from __future__ import annotations

from typing import Any, Dict

import google.generativeai as genai

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """Thin wrapper around Gemini text generation."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        generation_config: Dict[str, Any] | None = None,
    ):
        self.api_key = api_key or settings.GEMINI_API_KEY
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY is not set; cannot initialize LLM client.")

        genai.configure(api_key=self.api_key)

        self.model_name = model or settings.GEMINI_MODEL
        self.generation_config = generation_config or self._default_generation_config()
        self.model = genai.GenerativeModel(
            model_name=self.model_name,
            generation_config=genai.types.GenerationConfig(**self.generation_config),
        )
        logger.debug("Initialized Gemini model %s", self.model_name)

    @staticmethod
    def _default_generation_config() -> Dict[str, Any]:
        config: Dict[str, Any] = {
            "temperature": settings.LLM_TEMPERATURE,
            "top_p": 0.95,
            "top_k": 40,
        }
        if settings.LLM_JSON_MODE:
            config["response_mime_type"] = "application/json"
        return config

    def generate(self, prompt: str) -> str:
        """Generate raw text from the Gemini model."""
        response = self.model.generate_content(prompt)
        return getattr(response, "text", "") or ""
