"""Coarse heritage gate.

This is a keyword filter over the user's text plus a sanity check on the
cues, not an image classifier. Keywords are matched as plain substrings, so
"car" also matches "carving"; that imprecision is accepted.
"""

import logging
import re

from pydantic import BaseModel

from heritagelens.models.analysis import VisualCues

logger = logging.getLogger(__name__)

DISQUALIFYING_KEYWORDS = [
    "person",
    "human",
    "anime",
    "cartoon",
    "modern building",
    "house",
    "car",
    "animal",
    "nature",
    "landscape",
]

# Whole-word synonyms reported under their keyword.
KEYWORD_SYNONYMS = {
    "animal": ["dog", "dogs", "puppy", "cat", "cats", "kitten", "pet"],
}


class HeritageVerdict(BaseModel):
    is_heritage: bool
    reason: str | None = None
    keyword: str | None = None


def find_disqualifying_keyword(text: str) -> str | None:
    lowered = text.lower()
    for keyword in DISQUALIFYING_KEYWORDS:
        if keyword in lowered:
            return keyword
        for synonym in KEYWORD_SYNONYMS.get(keyword, []):
            if re.search(rf"\b{re.escape(synonym)}\b", lowered):
                return keyword
    return None


def classify_heritage(cues: VisualCues, text: str = "") -> HeritageVerdict:
    keyword = find_disqualifying_keyword(text)
    if keyword:
        logger.info("Heritage gate rejected content: keyword=%r", keyword)
        return HeritageVerdict(
            is_heritage=False,
            reason=f"Content appears to show '{keyword}' rather than a heritage monument or artifact.",
            keyword=keyword,
        )
    if not cues.architectural_style or not cues.structures:
        logger.info("Heritage gate rejected content: no architectural cues")
        return HeritageVerdict(
            is_heritage=False,
            reason="No identifiable heritage architecture or structural elements were detected.",
        )
    return HeritageVerdict(is_heritage=True)
