"""
Fact value formatter for Adaptive Card FactSets.

Teams renders fact values as plain strings, so payload scalars are converted
here: booleans become the display strings ``Yes``/``No`` and everything else
goes through ``str()``. ``None`` stays ``None`` so callers can drop the fact.
"""

from typing import Any, Optional

YES = "Yes"
NO = "No"


def format_value(val: Any, max_len: int = 1024) -> Optional[str]:
    """
    Format a single fact value into a display string.

    - ``None`` is returned unchanged.
    - Booleans map to ``Yes``/``No`` (checked before ``int``, since ``bool`` is one).
    - Other values are returned via ``str(val)``, truncated to *max_len* chars.
    """
    if val is None:
        return None

    if isinstance(val, bool):
        return YES if val else NO

    text = str(val)
    return f"{text[:max_len]}..." if len(text) > max_len else text
