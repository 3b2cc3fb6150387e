"""
Yes/no command recognition from speech transcripts.

Speech engines return a ranked list of candidate transcripts. Candidates are
checked in order; the first one containing a yes or no keyword decides.
Matching is on whole words so "now" never counts as "no".
"""

import re
from enum import Enum
from typing import Iterable, Optional, Union

YES_KEYWORDS = frozenset({
    "yes", "yep", "yeah", "yup", "correct", "right", "uh-huh",
    "sure", "okay", "ok", "affirmative",
})
NO_KEYWORDS = frozenset({"no", "nope", "nah", "wrong", "left", "negative", "not"})

_WHITESPACE = re.compile(r"\s+")


class VoiceCommand(Enum):
    YES = "yes"
    NO = "no"


def parse_command(transcripts: Union[str, Iterable[str]]) -> Optional[VoiceCommand]:
    """Find a yes/no command in one or more candidate transcripts.

    Args:
        transcripts: A single transcript or candidates ordered best-first

    Returns:
        VoiceCommand.YES, VoiceCommand.NO, or None if nothing matched
    """
    if isinstance(transcripts, str):
        transcripts = [transcripts]

    for transcript in transcripts:
        text = transcript.lower().strip()

        # Exact single-word matches first (most reliable)
        if text in YES_KEYWORDS:
            return VoiceCommand.YES
        if text in NO_KEYWORDS:
            return VoiceCommand.NO

        words = _WHITESPACE.split(text)
        if any(w in YES_KEYWORDS for w in words):
            return VoiceCommand.YES
        if any(w in NO_KEYWORDS for w in words):
            return VoiceCommand.NO

    return None


__all__ = ['YES_KEYWORDS', 'NO_KEYWORDS', 'VoiceCommand', 'parse_command']
