from rich.theme import Theme
from rich.console import Console
from rich.style import Style
from rich.text import Text

BRAND_BLUE = "#2E86DE"
HIGHLIGHT_GOLD = "#F1C40F"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=BRAND_BLUE, bold=True),
        "secondary": Style(color=HIGHLIGHT_GOLD, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "option_label": Style(color=HIGHLIGHT_GOLD, bold=True),
        "option_text": Style(color=TEXT_WHITE),
        "title": Style(color=BRAND_BLUE, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)

CONSOLE = Console(theme=DEFAULT_THEME)


def get_score_style(correct: int, total: int) -> Style:
    """Get color style for a section result by share of correct answers."""
    ratio = correct / total if total else 0.0
    if ratio >= 0.8:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif ratio >= 0.5:
        return Style(color=HIGHLIGHT_GOLD)
    else:
        return Style(color=ERROR_RED)


def create_success_header() -> Text:
    """Create a success/correct answer header."""
    header = Text()
    header.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
    header.append("Correct!", Style(color=SUCCESS_GREEN, bold=True))
    return header


def create_error_header() -> Text:
    """Create an error/incorrect answer header."""
    header = Text()
    header.append("✗ ", Style(color=ERROR_RED, bold=True))
    header.append("Not quite!", Style(color=ERROR_RED, bold=True))
    return header
