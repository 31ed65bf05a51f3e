"""
Poem styles and placeholder content shown before the first upload.
"""
from typing import Tuple

DEFAULT_STYLE = "free verse"

KNOWN_STYLES: Tuple[str, ...] = (
    "free verse",
    "haiku",
    "sonnet",
    "limerick",
    "elegy",
)

SAMPLE_POEM = """Where light and shadow softly correspond,
A silent chair, a window just beyond.
The world outside, a muted, hazy view,
Awaiting thoughts, both old and freshly new.

A stark design, in simple, graceful lines,
Where quiet contemplation intertwines.
This empty stage, for stories to unfold,
In whispers of the future, brave and bold."""


def is_known_style(style: str) -> bool:
    """Check if a style label is one of the built-in styles."""
    return style.strip().lower() in KNOWN_STYLES
