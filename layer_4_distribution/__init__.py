"""
Layer 4: Distribution
- Clipboard text formatting ("Subject: ..." + body)
- Browser copy button (Streamlit HTML component)
"""
from .clipboard import (
    format_clipboard_text,
    copy_template,
    build_copy_button_html,
    render_copy_button,
)

__all__ = [
    'format_clipboard_text',
    'copy_template',
    'build_copy_button_html',
    'render_copy_button',
]
