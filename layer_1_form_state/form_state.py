"""
Form state holder

Keeps the user's form inputs together with the outcome of the latest
generate request. The Streamlit page stores one FormState per browser
session, and every submission goes through begin_submission/apply_result
so the loading flag and the error/templates pair always stay consistent.
"""
from dataclasses import replace
from typing import List, Optional

from models.email_template import (
    EmailTemplate,
    FormInputs,
    GenerationResult,
    RequestStatus,
    SubmissionInProgressError,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class FormState:
    """Form fields plus loading/error/templates for one page session"""

    def __init__(self, inputs: Optional[FormInputs] = None):
        """
        Initialize form state

        Args:
            inputs: Starting field values (settings defaults if not provided)
        """
        self.inputs = inputs or FormInputs()
        self.templates: List[EmailTemplate] = []
        self.error = ""
        self.loading = False

    @property
    def status(self) -> RequestStatus:
        """Request status derived from the loading/error/templates fields"""
        if self.loading:
            return RequestStatus.IN_FLIGHT
        if self.error:
            return RequestStatus.FAILED
        if self.templates:
            return RequestStatus.SUCCEEDED
        return RequestStatus.IDLE

    def update_inputs(self, **changes: str) -> None:
        """
        Replace one or more form fields

        Raises:
            TypeError: if a field name is not part of the form
        """
        unknown = set(changes) - set(FormInputs.field_names())
        if unknown:
            raise TypeError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        self.inputs = replace(self.inputs, **changes)

    def begin_submission(self) -> None:
        """
        Move to the in-flight state and clear the previous outcome

        Raises:
            SubmissionInProgressError: if a request is already running
        """
        if self.loading:
            raise SubmissionInProgressError("A generate request is already in progress")

        self.loading = True
        self.templates = []
        self.error = ""
        logger.debug("Submission started")

    def apply_result(self, result: GenerationResult) -> None:
        """Store the outcome of a finished request (finish_submission clears loading)"""
        if result.succeeded:
            self.templates = list(result.templates)
            self.error = ""
        else:
            self.templates = []
            self.error = result.error

    def finish_submission(self) -> None:
        """Clear the loading flag (safe to call more than once)"""
        self.loading = False
        logger.debug(f"Submission state: {self.status.value}")
