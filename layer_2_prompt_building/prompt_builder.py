"""
Prompt construction for the outreach email generator

Builds the agency's base outreach email from the sender's contact details
and wraps it in the instruction that asks Gemini for several JSON-formatted
variations. Everything here is plain string templating.
"""
from config.settings import settings

WEBSITE_ISSUE_MARKER = "[WEBSITE_ISSUE]"
EMAIL_PLACEHOLDER = "[Your email address]"
WEBSITE_PLACEHOLDER = "[Your website link]"


def build_base_template(inputs) -> str:
    """
    Build the fixed outreach email the model should vary

    Args:
        inputs: FormInputs with the sender's contact details

    Returns:
        Email text containing the [WEBSITE_ISSUE] marker
    """
    reply_email = inputs.reply_email.strip() or EMAIL_PLACEHOLDER
    website_link = inputs.website_link.strip() or WEBSITE_PLACEHOLDER
    portfolio_link = inputs.portfolio_link.strip()
    portfolio_line = f"\n💼 {portfolio_link}" if portfolio_link else ""

    return f"""
Hello there,

My name is {settings.SENDER_NAME}, and I'm reaching out from {settings.AGENCY_NAME}, a modern software agency specializing in web development.

We build websites using the latest technologies like React, Next.js, Vue.js, and Svelte, along with powerful design systems that make your site stand out, load fast, and work great on any device.

While visiting your website, we noticed a few areas that could be improved:

{WEBSITE_ISSUE_MARKER}

We'd love to help you rebuild or upgrade your site to make it:

Fully responsive and mobile-friendly

Modern and visually appealing

Optimized for performance and user experience

In {settings.TARGET_YEAR}, having a cool, clean, and user-friendly website isn't just an option—it's a necessity.

✨ Ready to transform your online presence? ✨

If you're interested, we'd be happy to provide a free consultation and show you what your updated site could look like. Here's how to get started:

🔹 Reply to this email with "Let's talk" to schedule your FREE consultation
🔹 Visit {website_link} and use our contact form


Take your first step toward a website that truly represents your brand's potential!

Looking forward to hearing from you!

Best regards,
{settings.SENDER_NAME}
{settings.AGENCY_NAME}
📧 {reply_email}
🌐 {website_link}{portfolio_line}"""


def _json_example(template_count: int) -> str:
    """Example "templates" payload shown to the model"""
    entries = []
    for idx in range(template_count):
        prefix = "" if idx == 0 else "Different "
        entries.append(
            "    {\n"
            f'      "subject": "{prefix}Subject line here",\n'
            f'      "body": "{prefix}Full email body here with proper line breaks"\n'
            "    }"
        )
    return '{\n  "templates": [\n' + ",\n".join(entries) + "\n  ]\n}"


def build_prompt(inputs, template_count: int = settings.TEMPLATE_COUNT) -> str:
    """
    Build the full generation prompt

    Args:
        inputs: FormInputs from the form
        template_count: How many email variations to ask for

    Returns:
        Prompt string
    """
    issue = inputs.issue_description
    base_template = build_base_template(inputs)

    return f"""Generate {template_count} different professional email templates for a web development agency.

Each email should follow this exact structure, but with variations in wording, tone, and specific details:

1. Use a catchy, professional subject line about modernizing websites for {settings.TARGET_YEAR}
2. Use this exact email body template, but replace {WEBSITE_ISSUE_MARKER} with creative and detailed descriptions of the website issue: "{issue}"

{base_template}

Format the response as JSON with this structure:
{_json_example(template_count)}

Make sure to maintain the exact structure of the template while making the content variations feel natural and professional.
Each template should describe the website issue ({issue}) in a different, detailed way.

Return ONLY valid JSON, no markdown or additional text."""
