from __future__ import annotations

import re
from enum import Enum
from typing import Optional


class Label(str, Enum):
    CALENDAR = "calendar"
    FINANCIAL = "financial"
    AUDIENCE = "audience"
    TOURING = "touring"


LABEL_VALUES = [label.value for label in Label]

_LABEL_RE = re.compile("(" + "|".join(LABEL_VALUES) + ")")


def find_label(text: str) -> Optional[Label]:
    """Return the label occurring earliest in text (case-insensitive), or None."""
    m = _LABEL_RE.search((text or "").lower())
    if m is None:
        return None
    return Label(m.group(1))
