"""
Layer 3: Response Interpretation
- Response Interpreter (Gemini call, JSON extraction, template validation)
- Template Generator (orchestrates one form submission)
"""
from .response_interpreter import (
    ResponseInterpreter,
    extract_json_object,
    parse_templates,
    PARSE_ERROR_MESSAGE,
)
from .generate_templates import TemplateGenerator

__all__ = [
    'ResponseInterpreter',
    'extract_json_object',
    'parse_templates',
    'PARSE_ERROR_MESSAGE',
    'TemplateGenerator',
]
