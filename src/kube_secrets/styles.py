"""Styling for the interactive context prompt."""

from questionary import Style

# ANSI 256 colors, matching the secret name/key colors of the listing
PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#5fafff bold"),  # Blue question mark
        ("question", "bold"),
        ("answer", "fg:#87d787 bold"),  # Green submitted answer
        ("pointer", "fg:#5fafff bold"),
        ("highlighted", "fg:#1c1c1c bg:#5fafff bold"),  # Dark text on blue background
        ("instruction", "fg:#6c6c6c italic"),
        ("text", ""),
    ]
)

POINTER = "❯ "
QMARK = "? "
