"""
Unit tests for Layer 2: Prompt Building
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layer_2_prompt_building.prompt_builder import (
    build_base_template,
    build_prompt,
    WEBSITE_ISSUE_MARKER,
    EMAIL_PLACEHOLDER,
    WEBSITE_PLACEHOLDER,
)
from models.email_template import FormInputs
from config.settings import settings


def make_inputs(**overrides):
    values = {
        "issue_description": "the site isn't mobile-friendly",
        "reply_email": "hello@agency.dev",
        "website_link": "https://agency.dev/",
        "portfolio_link": "https://portfolio.agency.dev/",
    }
    values.update(overrides)
    return FormInputs(**values)


class TestBaseTemplate:
    """Test the base outreach email"""

    def test_contains_contact_details(self):
        template = build_base_template(make_inputs())

        assert "📧 hello@agency.dev" in template
        assert "🌐 https://agency.dev/" in template
        assert "Visit https://agency.dev/ and use our contact form" in template
        assert "💼 https://portfolio.agency.dev/" in template

    def test_keeps_issue_marker(self):
        template = build_base_template(make_inputs())
        assert WEBSITE_ISSUE_MARKER in template
        # The issue text is substituted by the model, not here
        assert "the site isn't mobile-friendly" not in template

    def test_signed_by_sender(self):
        template = build_base_template(make_inputs())
        assert f"My name is {settings.SENDER_NAME}" in template
        assert template.count(settings.AGENCY_NAME) >= 2
        assert str(settings.TARGET_YEAR) in template

    def test_keeps_original_pitch_wording(self):
        template = build_base_template(make_inputs())
        assert (
            f"In {settings.TARGET_YEAR}, having a cool, clean, and user-friendly website "
            "isn't just an option—it's a necessity."
        ) in template

    def test_blank_fields_use_placeholders(self):
        template = build_base_template(make_inputs(reply_email="", website_link="  "))

        assert f"📧 {EMAIL_PLACEHOLDER}" in template
        assert f"🌐 {WEBSITE_PLACEHOLDER}" in template
        assert f"Visit {WEBSITE_PLACEHOLDER}" in template

    def test_blank_portfolio_drops_line(self):
        template = build_base_template(make_inputs(portfolio_link=""))

        assert "💼" not in template
        assert template.rstrip().endswith("🌐 https://agency.dev/")


class TestBuildPrompt:
    """Test the generation prompt"""

    def test_includes_issue_and_base_template(self):
        inputs = make_inputs()
        prompt = build_prompt(inputs)

        assert prompt.count('"the site isn\'t mobile-friendly"') == 1
        assert "(the site isn't mobile-friendly)" in prompt
        assert build_base_template(inputs) in prompt

    def test_issue_description_is_verbatim(self):
        issue = "  slow pages,\n  broken menu  "
        prompt = build_prompt(make_inputs(issue_description=issue))

        assert f'website issue: "{issue}"' in prompt
        assert f"({issue})" in prompt

    def test_asks_for_requested_number_of_templates(self):
        prompt = build_prompt(make_inputs(), template_count=3)

        assert prompt.startswith("Generate 3 different professional email templates")
        assert prompt.count('"subject":') == 3
        assert prompt.count('"body":') == 3
        assert '"templates": [' in prompt

    def test_template_count_is_configurable(self):
        prompt = build_prompt(make_inputs(), template_count=2)

        assert prompt.startswith("Generate 2 different")
        assert prompt.count('"subject":') == 2

    def test_is_deterministic(self):
        inputs = make_inputs()
        assert build_prompt(inputs) == build_prompt(inputs)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
