# utils.py

from typing import List, Sequence

from config import FRAME_COLORS, MAX_FRAMES, MIN_FRAMES, THRASHING_THRESHOLD
from engine import HIT, ExecutionStep


def parse_reference_string(text: str) -> List[int]:
    """
    Convert a comma separated page sequence into page numbers.

    Tokens are stripped of whitespace and parsed as integers. Tokens that
    do not parse (empty, non-numeric, fractional) are dropped silently.

    Example:
        "7,0,1,2, ,x,3" -> [7, 0, 1, 2, 3]
    """
    pages = []
    for token in text.split(','):
        try:
            pages.append(int(token.strip()))
        except ValueError:
            continue
    return pages


def format_reference_string(references: Sequence[int]) -> str:
    return ','.join(str(page) for page in references)


def clamp_frame_count(value) -> int:
    """Coerce a user supplied frame count into [MIN_FRAMES, MAX_FRAMES]."""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return MIN_FRAMES
    return max(MIN_FRAMES, min(MAX_FRAMES, count))


def hit_ratio(hits: int, total: int) -> float:
    """Hits as a percentage of total references, 0.0 when nothing ran."""
    if total <= 0:
        return 0.0
    return round(hits / total * 100, 2)


def miss_ratio(hits: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(100 - hit_ratio(hits, total), 2)


def is_thrashing(miss_pct: float) -> bool:
    return miss_pct > THRASHING_THRESHOLD


def frame_state(step: ExecutionStep, index: int) -> str:
    """
    Classify one frame slot of a step for display.

    Returns 'empty' for an unused slot, 'hit' or 'fault' for the slot that
    holds the page referenced at this step, and 'filled' otherwise.
    """
    if step is None or index >= len(step.frames):
        return "empty"
    if step.frames[index] == step.page:
        return "hit" if step.status == HIT else "fault"
    return "filled"


def get_color(state: str) -> str:
    """Return the display colour for a frame state."""
    return FRAME_COLORS.get(state, FRAME_COLORS["empty"])
