"""
Streamlit page for the AI Email Generator

Collect the website issue and the sender's contact details, generate
outreach email variations with Gemini and copy them to the clipboard.
"""
import streamlit as st

from layer_1_form_state.form_state import FormState
from layer_3_response_interpretation.generate_templates import TemplateGenerator
from layer_4_distribution.clipboard import format_clipboard_text, render_copy_button
from models.email_template import SubmissionInProgressError
from utils.logger import get_logger

logger = get_logger(__name__)

# Page configuration
st.set_page_config(
    page_title="AI Email Generator",
    page_icon="✉️",
    layout="centered",
)

st.markdown("""
    <style>
    .main-header {
        font-size: 2rem;
        font-weight: bold;
        color: #065f46;
        text-align: center;
        margin-bottom: 1.5rem;
    }
    </style>
""", unsafe_allow_html=True)


FIELD_KEYS = {
    "issue_description": "field_issue_description",
    "reply_email": "field_reply_email",
    "website_link": "field_website_link",
    "portfolio_link": "field_portfolio_link",
}


def get_form_state() -> FormState:
    """Form state for this browser session"""
    if 'form_state' not in st.session_state:
        st.session_state['form_state'] = FormState()
    return st.session_state['form_state']


def get_generator() -> TemplateGenerator:
    if 'generator' not in st.session_state:
        st.session_state['generator'] = TemplateGenerator()
    return st.session_state['generator']


def on_submit() -> None:
    """
    Submit button callback

    Streamlit runs this before the rerun, so the form below is already drawn
    disabled while the request is in flight.
    """
    state = get_form_state()
    state.update_inputs(**{
        name: st.session_state.get(key, getattr(state.inputs, name))
        for name, key in FIELD_KEYS.items()
    })

    problems = state.inputs.validate()
    st.session_state['form_problems'] = problems
    if problems:
        return

    try:
        state.begin_submission()
    except SubmissionInProgressError as e:
        logger.warning(f"Ignored overlapping submission: {e}")


def render_form(state: FormState) -> None:
    """Draw the input form"""
    with st.form("email_form"):
        st.text_area(
            "Website Issue Description",
            value=state.inputs.issue_description,
            key=FIELD_KEYS["issue_description"],
            placeholder=(
                "Describe the specific issue with their website, e.g., 'the site isn't "
                "mobile-friendly,' 'it looks outdated,' or 'it loads slowly.'"
            ),
            height=120,
        )

        col1, col2 = st.columns(2)
        with col1:
            st.text_input(
                "Your Email Address",
                value=state.inputs.reply_email,
                key=FIELD_KEYS["reply_email"],
                placeholder="your.email@example.com",
            )
        with col2:
            st.text_input(
                "Your Website Link",
                value=state.inputs.website_link,
                key=FIELD_KEYS["website_link"],
                placeholder="https://example.com",
            )

        st.text_input(
            "Your Portfolio Link (Optional)",
            value=state.inputs.portfolio_link,
            key=FIELD_KEYS["portfolio_link"],
            placeholder="https://portfolio.example.com",
        )

        label = "Generating Emails..." if state.loading else "Generate Email Templates"
        st.form_submit_button(label, type="primary", disabled=state.loading,
                              on_click=on_submit, width="stretch")


def render_results(state: FormState) -> None:
    """Draw the error message or the generated template cards"""
    if state.error:
        st.subheader("Error:")
        st.error(state.error)

    if state.templates:
        st.markdown("---")
        st.header("Your AI-Generated Email Templates:")

        for idx, template in enumerate(state.templates):
            with st.container(border=True):
                col1, col2 = st.columns([4, 1])
                with col1:
                    st.subheader(f"Template {idx + 1}")
                with col2:
                    render_copy_button(format_clipboard_text(template), key=f"copy_template_{idx}")

                st.markdown(f"**Subject:** {template.subject}")
                st.text(template.body)


def main():
    """Main page"""
    st.markdown('<div class="main-header">AI Email Generator for Web Development Services</div>',
                unsafe_allow_html=True)

    state = get_form_state()
    render_form(state)

    for problem in st.session_state.pop('form_problems', []):
        st.warning(problem)

    if state.loading:
        with st.spinner("Generating Emails..."):
            get_generator().complete(state)
        # Redraw the form enabled now that the request is done
        if not state.loading:
            st.rerun()

    render_results(state)


if __name__ == "__main__":
    main()
