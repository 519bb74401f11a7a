"""Visual cue extraction.

The default extractor is a content-derived deterministic stand-in: it hashes
fixed windows of the encoded image payload and indexes fixed vocabularies. No
image content is actually interpreted. A real vision backend can replace it by
implementing ``CueExtractor``.
"""

import logging
from abc import ABC, abstractmethod

from heritagelens.models.analysis import VisualCues
from heritagelens.services.hashing import content_hash, pick

logger = logging.getLogger(__name__)

ARCHITECTURAL_STYLES = [
    "Dravidian", "Nagara", "Indo-Islamic", "Hoysala",
    "Pallava", "Chola", "Mughal", "Rajput",
]
MATERIALS = ["Granite", "Sandstone", "Marble", "Soapstone", "Limestone"]
STRUCTURES = [
    "Gopurams",
    "Pillars with lotus capitals",
    "Barrel-vaulted roofs",
    "Star-shaped platforms",
    "Mandapas",
    "Mukhamandapa",
    "Shikhara",
]
ICONOGRAPHY = [
    "Divine deities in relief",
    "Mythological narratives",
    "Sacred geometry patterns",
    "Celestial beings",
    "Animal motifs",
    "Floral designs",
]
CARVINGS = [
    "High-relief carvings",
    "Intricate stone work",
    "Decorative friezes",
    "Narrative panels",
    "Geometric patterns",
    "Floral and foliate motifs",
]
PERIODS = [
    "7th-8th Century CE",
    "9th-10th Century CE",
    "11th-12th Century CE",
    "13th-14th Century CE",
    "15th-16th Century CE",
]
DYNASTIES = ["Pallava", "Chola", "Hoysala", "Vijayanagara", "Mughal", "Rajput"]

WINDOW_SIZE = 1000

# (start offset, entry count) per category; offsets step by 100
STYLE_WINDOW = (0, 1)
MATERIALS_WINDOW = (100, 2)
STRUCTURES_WINDOW = (200, 3)
ICONOGRAPHY_WINDOW = (300, 2)
CARVINGS_WINDOW = (400, 2)
PERIOD_WINDOW = (500, 1)
DYNASTY_WINDOW = (600, 2)


def window_hash(payload: str, start: int) -> int:
    return content_hash(payload[start:start + WINDOW_SIZE])


class CueExtractor(ABC):
    """Abstract base for turning an image payload into VisualCues."""

    name: str = "base"

    @abstractmethod
    def extract(self, payload: str) -> VisualCues:
        ...


class HashCueExtractor(CueExtractor):
    """Derives cues from hashes of fixed payload windows."""

    name = "content-hash"

    def extract(self, payload: str) -> VisualCues:
        style_hash = window_hash(payload, STYLE_WINDOW[0])
        styles = pick(ARCHITECTURAL_STYLES, style_hash)
        if style_hash % 3 == 0:
            styles += pick(ARCHITECTURAL_STYLES, style_hash + 1)

        cues = VisualCues(
            architectural_style=styles,
            materials=self._select(payload, MATERIALS, MATERIALS_WINDOW),
            structures=self._select(payload, STRUCTURES, STRUCTURES_WINDOW),
            iconography=self._select(payload, ICONOGRAPHY, ICONOGRAPHY_WINDOW),
            carvings=self._select(payload, CARVINGS, CARVINGS_WINDOW),
            estimated_period=self._select(payload, PERIODS, PERIOD_WINDOW)[0],
            estimated_dynasty=self._select(payload, DYNASTIES, DYNASTY_WINDOW),
        )
        logger.debug("Extracted cues: styles=%s period=%s", cues.architectural_style, cues.estimated_period)
        return cues

    @staticmethod
    def _select(payload: str, vocabulary: list[str], window: tuple[int, int]) -> list[str]:
        start, count = window
        return pick(vocabulary, window_hash(payload, start), count)


def _joined(values: list[str], default: str) -> str:
    return ", ".join(values) if values else default


def render_visual_summary(cues: VisualCues, text: str = "") -> str:
    """Multi-line summary of the extracted cues and the user's context."""
    return "\n".join([
        "Visual Cue Extraction:",
        f"- Architectural Style: {_joined(cues.architectural_style, 'Classical/Traditional')}",
        f"- Materials: {_joined(cues.materials, 'Stone and masonry')}",
        f"- Structural Elements: {_joined(cues.structures, 'Traditional structural elements')}",
        f"- Iconography: {_joined(cues.iconography, 'Religious and decorative motifs')}",
        f"- Carving Style: {_joined(cues.carvings, 'Decorative carvings')}",
        f"- Estimated Period: {cues.estimated_period or 'Medieval period'}",
        f"- Likely Dynasties: {_joined(cues.estimated_dynasty, 'Regional dynasties')}",
        f"- User Context: {text.strip() or 'No additional context provided'}",
    ])
