"""
Email template data models
"""
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List

from config.settings import settings

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


class ResponseFormatError(ValueError):
    """Raised when the model reply is not a usable list of templates."""


class SubmissionInProgressError(RuntimeError):
    """Raised when a submission starts while another one is still in flight."""


class RequestStatus(Enum):
    """Lifecycle of a single generate request"""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class EmailTemplate:
    """One generated outreach email draft"""
    subject: str
    body: str

    @classmethod
    def from_dict(cls, data: Any) -> "EmailTemplate":
        """
        Build a template from one entry of the model's "templates" array

        Raises:
            ResponseFormatError: if the entry is not an object with string subject and body
        """
        if not isinstance(data, dict):
            raise ResponseFormatError(f"Template entry must be an object, got {type(data).__name__}")

        for key in ("subject", "body"):
            if key not in data:
                raise ResponseFormatError(f"Template entry is missing '{key}'")
            if not isinstance(data[key], str):
                raise ResponseFormatError(
                    f"Template '{key}' must be a string, got {type(data[key]).__name__}"
                )

        return cls(subject=data["subject"], body=data["body"])

    def to_dict(self) -> Dict[str, str]:
        return {"subject": self.subject, "body": self.body}


@dataclass
class FormInputs:
    """Values the user typed into the form"""
    issue_description: str = ""
    reply_email: str = settings.DEFAULT_REPLY_EMAIL
    website_link: str = settings.DEFAULT_WEBSITE_LINK
    portfolio_link: str = settings.DEFAULT_PORTFOLIO_LINK

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def validate(self) -> List[str]:
        """
        Check the inputs the way the browser form would

        Returns:
            List of problems (empty when the inputs are usable)
        """
        problems = []

        if not self.issue_description.strip():
            problems.append("Please describe the website issue.")

        email = self.reply_email.strip()
        if not email:
            problems.append("Please enter your email address.")
        elif not EMAIL_PATTERN.match(email):
            problems.append(f"'{email}' is not a valid email address.")

        for label, value in (("website", self.website_link), ("portfolio", self.portfolio_link)):
            value = value.strip()
            if value and not URL_PATTERN.match(value):
                problems.append(f"Your {label} link must be a full http(s) URL.")

        return problems


@dataclass
class GenerationResult:
    """Outcome of one generate call: templates or an error message, never both"""
    templates: List[EmailTemplate] = field(default_factory=list)
    error: str = ""

    def __post_init__(self):
        if self.templates and self.error:
            raise ValueError("GenerationResult cannot carry both templates and an error")

    @property
    def succeeded(self) -> bool:
        return not self.error
