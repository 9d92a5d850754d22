"""
Copy-to-clipboard action for generated templates

The clipboard lives in the user's browser, so the copy button is rendered
as a small HTML component that calls navigator.clipboard.writeText.
"""
import json
import uuid
from typing import Optional, Sequence

import streamlit.components.v1 as components

from models.email_template import EmailTemplate
from utils.logger import get_logger

logger = get_logger(__name__)

COPY_SUCCESS_MESSAGE = "Email copied to clipboard!"
COPY_FAILURE_MESSAGE = "Copy failed. Please select the text and copy it manually."


def format_clipboard_text(template: EmailTemplate) -> str:
    """Clipboard text for a template: subject line, blank line, body"""
    return f"Subject: {template.subject}\n\n{template.body}"


def copy_template(templates: Sequence[EmailTemplate], index: int) -> str:
    """
    Clipboard text for the template at a position in the rendered list

    Raises:
        IndexError: if index is outside the list
    """
    if index < 0 or index >= len(templates):
        raise IndexError(f"No template at position {index} (have {len(templates)})")
    return format_clipboard_text(templates[index])


def _js_string(value: str) -> str:
    """JavaScript string literal that is safe inside a <script> block"""
    return json.dumps(value).replace("</", "<\\/")


def build_copy_button_html(text: str, label: str = "Copy", element_id: Optional[str] = None) -> str:
    """HTML document for a button that writes text to the browser clipboard"""
    uid = element_id or "copy_" + uuid.uuid4().hex
    return f"""
    <!doctype html>
    <html>
      <head>
        <meta charset="utf-8"/>
        <style>
          body {{ margin:0; padding:0; background:transparent; }}
          .btn {{
            padding:6px 16px;
            border-radius:6px;
            border:none;
            background:#10b981;
            color:white;
            cursor:pointer;
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial;
            font-size:14px;
          }}
        </style>
      </head>
      <body>
        <button id="{uid}" class="btn">{label}</button>
        <script>
          const txt = {_js_string(text)};
          document.getElementById("{uid}").addEventListener('click', function() {{
            navigator.clipboard.writeText(txt).then(function() {{
              alert({_js_string(COPY_SUCCESS_MESSAGE)});
            }}).catch(function(err) {{
              console.error("Failed to copy: ", err);
              alert({_js_string(COPY_FAILURE_MESSAGE)});
            }});
          }});
        </script>
      </body>
    </html>
    """


def render_copy_button(text: str, label: str = "Copy", key: Optional[str] = None) -> None:
    """
    Render the copy button into the current Streamlit container

    Args:
        text: Text written to the clipboard when clicked
        label: Button caption
        key: Stable element id (random if not provided)
    """
    logger.debug(f"Rendering copy button for {len(text)} characters")
    components.html(build_copy_button_html(text, label, key), height=44, scrolling=False)
