"""
Entry point for generating email templates from the form

Runs one submission end to end:
1. Marks the form as loading and clears the previous outcome
2. Builds the prompt from the form inputs
3. Asks the model and interprets the reply
4. Stores the templates or the error on the form state
"""
from typing import Optional

from config.settings import settings
from layer_1_form_state.form_state import FormState
from layer_2_prompt_building.prompt_builder import build_prompt
from layer_3_response_interpretation.response_interpreter import ResponseInterpreter
from models.email_template import GenerationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class TemplateGenerator:
    """Generate outreach email templates for a FormState"""

    def __init__(self, interpreter: Optional[ResponseInterpreter] = None):
        self.interpreter = interpreter or ResponseInterpreter()

    def submit(self, state: FormState) -> GenerationResult:
        """
        Run one submission against the given form state

        Args:
            state: Form state to read inputs from and store the outcome on

        Returns:
            The GenerationResult that was applied
        """
        state.begin_submission()
        return self.complete(state)

    def complete(self, state: FormState) -> GenerationResult:
        """
        Finish a submission that begin_submission already started

        The page calls begin_submission from the submit button callback so the
        form is drawn disabled while this runs.

        Args:
            state: In-flight form state

        Returns:
            The GenerationResult that was applied
        """
        try:
            prompt = build_prompt(state.inputs, self.interpreter.expected_count or settings.TEMPLATE_COUNT)
            logger.info(f"Generating templates for issue: {state.inputs.issue_description[:60]!r}")
            result = self.interpreter.generate(prompt)
            state.apply_result(result)
            return result
        finally:
            state.finish_submission()
