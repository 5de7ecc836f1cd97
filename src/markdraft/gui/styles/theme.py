"""
Theme definitions for the Mark Draft GUI.
"""
from typing import Optional, Tuple

from markdraft.core.models import Power


class Colors:
    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"

    # Text
    TEXT_PRIMARY = "#1f1f1f"

    # Borders & Dividers
    BORDER = "#e0e0e0"

    # Status
    ERROR = "#d32f2f"
    WARNING = "#f57c00"

    # Draft headers
    DRAW_HEADER = "#d32f2f"

    # Current line
    SELECTION_BG = "#1490DF"
    SELECTION_TEXT = "#ffffff"


class Fonts:
    MONO_FONT = "Menlo, Consolas, 'DejaVu Sans Mono', monospace"


# Foreground, background (None = widget default) per quality tier
POWER_COLORS = {
    Power.BAD_KARMA: ("#000000", "#d32f2f"),
    Power.POOR: ("#757575", None),
    Power.MODERATE: (Colors.TEXT_PRIMARY, None),
    Power.GOOD: ("#388e3c", None),
    Power.GREAT: ("#0097a7", None),
    Power.SUPREME: ("#d32f2f", None),
    Power.UNIQUE: ("#8e24aa", None),
}


def power_colors(power: Power) -> Tuple[str, Optional[str]]:
    """Foreground and optional background colour for a quality tier."""
    return POWER_COLORS[power]


def power_is_bold(power: Power) -> bool:
    return power is Power.BAD_KARMA


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}
    QListWidget, QTableWidget, QTextBrowser, QPlainTextEdit {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
    }}
    QGroupBox {{
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
        margin-top: 20px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px;
    }}
"""
