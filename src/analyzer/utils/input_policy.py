# src/analyzer/utils/input_policy.py
from typing import Optional

EMPTY_INPUT_MESSAGE = "Please enter some text to analyze."


def prepare_input(raw_text: Optional[str], reject_blank: bool = True) -> Optional[str]:
    """
    Applies the host-side input policy before analysis.

    The text is trimmed. When `reject_blank` is set, None is returned for
    missing, empty or whitespace-only input so the caller can show
    EMPTY_INPUT_MESSAGE instead of a zeroed report.
    """
    text = (raw_text or "").strip()
    if not text and reject_blank:
        return None
    return text
