"""
Layer 2: Prompt Building
- Base outreach email (sender details, [WEBSITE_ISSUE] marker)
- Generation prompt (asks for JSON-formatted variations)
"""
from .prompt_builder import build_base_template, build_prompt, WEBSITE_ISSUE_MARKER

__all__ = [
    'build_base_template',
    'build_prompt',
    'WEBSITE_ISSUE_MARKER',
]
