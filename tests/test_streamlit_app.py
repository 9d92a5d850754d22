"""
Page tests for the Streamlit app
Drives streamlit_app.py with AppTest and a mocked Gemini client
"""
import sys
import os
import json
from unittest.mock import Mock

from streamlit.testing.v1 import AppTest

# Add parent directory to path
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT_DIR)

from layer_1_form_state.form_state import FormState
from layer_3_response_interpretation.generate_templates import TemplateGenerator
from layer_3_response_interpretation.response_interpreter import ResponseInterpreter
from models.email_template import FormInputs

APP_FILE = os.path.join(ROOT_DIR, "streamlit_app.py")

TEMPLATES = [
    {"subject": f"Subject {i}", "body": f"Hello there,\n\nBody {i}"}
    for i in range(3)
]


def make_app(generator=None, state=None):
    at = AppTest.from_file(APP_FILE, default_timeout=30)
    if generator is not None:
        at.session_state["generator"] = generator
    if state is not None:
        at.session_state["form_state"] = state
    return at


def make_generator(reply=None):
    llm_client = Mock()
    llm_client.generate.return_value = reply or json.dumps({"templates": TEMPLATES})
    return TemplateGenerator(ResponseInterpreter(llm_client=llm_client, expected_count=3)), llm_client


class TestStreamlitApp:
    """Test the page flow"""

    def test_initial_render(self):
        at = make_app(generator=Mock())
        at.run()

        assert not at.exception
        assert at.button[0].label == "Generate Email Templates"
        assert at.button[0].disabled is False

    def test_submit_disabled_while_request_pending(self):
        state = FormState(FormInputs(issue_description="It loads slowly", reply_email="me@example.com"))
        state.begin_submission()
        generator = Mock()
        # Leaves the state in flight, like a request that has not returned yet
        generator.complete.return_value = None

        at = make_app(generator=generator, state=state)
        at.run()

        assert not at.exception
        generator.complete.assert_called_once_with(state)
        assert at.button[0].disabled is True
        assert at.button[0].label == "Generating Emails..."

    def test_submit_generates_templates(self):
        generator, llm_client = make_generator()
        at = make_app(generator=generator)
        at.run()

        at.text_area[0].input("The site isn't mobile-friendly")
        at.button[0].click()
        at.run()

        assert not at.exception
        llm_client.generate.assert_called_once()
        assert "The site isn't mobile-friendly" in llm_client.generate.call_args.args[0]

        state = at.session_state["form_state"]
        assert [t.subject for t in state.templates] == [t["subject"] for t in TEMPLATES]
        assert state.loading is False
        assert at.button[0].disabled is False
        assert "Template 1" in [header.value for header in at.subheader]

    def test_invalid_inputs_do_not_call_model(self):
        generator, llm_client = make_generator()
        at = make_app(generator=generator)
        at.run()

        at.text_input[0].input("not-an-email")
        at.button[0].click()
        at.run()

        assert not at.exception
        llm_client.generate.assert_not_called()
        assert len(at.warning) >= 1
        assert at.session_state["form_state"].loading is False
