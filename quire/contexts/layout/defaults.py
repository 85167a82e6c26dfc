"""
Default values for QUIRE page layout.

Provides the baseline merged under presets and user YAML overrides by
config.load_layout_config(). Distances are millimetres, font sizes are points.
"""

from copy import deepcopy
from typing import Any, Dict

# A4 portrait; the bottom margin is where content must stop, not a drawn edge
DEFAULT_PAGE = {
    "width": 210.0,
    "height": 297.0,
    "margin_left": 18.0,
    "margin_right": 18.0,
    "margin_top": 18.0,
    "margin_bottom": 20.0,
}

# Standard PDF base fonts (no embedding needed)
DEFAULT_FONTS = {
    "regular": "Helvetica",
    "bold": "Helvetica-Bold",
}

# Per-role typography and spacing
DEFAULT_STYLES = {
    "name": {
        "font_size": 24.0,
        "space_needed": 15.0,
        "advance": 10.0,
    },
    "contact": {
        "font_size": 9.0,
        "advance": 8.0,
        "separator": "  •  ",
        "divider_thickness": 0.8,
        "divider_gap": 8.0,
    },
    "section_header": {
        "font_size": 13.0,
        "space_needed": 20.0,
        "padding_before": 4.0,
        "advance": 8.0,
        "underline_offset": 1.0,
        "underline_thickness": 0.6,
    },
    "subsection": {
        "label_font_size": 10.0,
        "font_size": 9.5,
        "space_needed": 10.0,
        "continuation_space_needed": 6.0,
        "advance": 5.0,
        "label_gap": 1.0,
        "wrap_gap": 2.0,
    },
    "job_title_date": {
        "font_size": 11.0,
        "date_font_size": 10.0,
        "space_needed": 15.0,
        "padding_before": 2.0,
        "advance": 5.0,
        "padding_after": 6.0,
        "date_gap": 5.0,
    },
    "bullet": {
        "font_size": 9.5,
        "space_needed": 8.0,
        "continuation_space_needed": 6.0,
        "glyph": "•",
        "glyph_offset": 3.0,
        "text_indent": 8.0,
        "wrap_inset": 10.0,
        "advance": 4.5,
        "final_advance": 5.0,
    },
    "paragraph": {
        "font_size": 10.0,
        "space_needed": 8.0,
        "continuation_space_needed": 6.0,
        "advance": 5.0,
    },
    "blank": {
        "advance": 2.0,
    },
}


def get_default_layout() -> Dict[str, Any]:
    """
    Get the complete default layout structure with all expected fields.

    Returns:
        Fresh nested dict (safe to mutate) with page, fonts and styles keys
    """
    return {
        "page": deepcopy(DEFAULT_PAGE),
        "fonts": deepcopy(DEFAULT_FONTS),
        "styles": deepcopy(DEFAULT_STYLES),
    }
