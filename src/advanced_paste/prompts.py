"""Prompt templates for clipboard reformatting."""

SYSTEM_INSTRUCTIONS = """You are tasked with reformatting user's clipboard data. Use the user's instructions, and the content of their clipboard below to edit their clipboard content as they have requested it.

Do not output anything else besides the reformatted clipboard content."""

USER_MESSAGE_TEMPLATE = """User instructions:
{instructions}

Clipboard Content:
{clipboard_content}

Output:
"""


def build_user_message(instructions: str, clipboard_content: str) -> str:
    if instructions is None or clipboard_content is None:
        raise ValueError("instructions and clipboard_content must not be None")
    # str.format does not re-interpret braces inside the substituted values.
    return USER_MESSAGE_TEMPLATE.format(
        instructions=instructions,
        clipboard_content=clipboard_content,
    )
