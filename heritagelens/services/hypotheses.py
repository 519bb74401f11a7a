"""Candidate identifications built from cue templates and place keywords."""

from heritagelens.models.analysis import VisualCues

MAX_HYPOTHESES = 8
TEMPLATE_HYPOTHESES = 5

LOCATION_HYPOTHESES = {
    "hampi": (
        "Vijayanagara Empire monument at Hampi, part of the 14th-16th century imperial "
        "capital known for its Vitthala and Virupaksha temple complexes"
    ),
    "kanchipuram": (
        "Pallava or Chola period Dravidian temple at Kanchipuram, the 'city of a thousand "
        "temples' and an early centre of South Indian stone architecture"
    ),
    "jaipur": (
        "Rajput-Mughal synthesis monument in the Jaipur region, combining Rajput fortification "
        "with Mughal domes, jharokhas and courtyard planning"
    ),
}


def _first(values: list[str], index: int, default: str) -> str:
    return values[index] if len(values) > index else default


def generate_hypotheses(cues: VisualCues, text: str = "") -> list[str]:
    """Return 5-8 hypotheses: five template ones, then any place-keyword bonuses."""
    style = _first(cues.architectural_style, 0, "Classical")
    material = _first(cues.materials, 0, "stone")
    structure = _first(cues.structures, 0, "pillar")
    dynasty = _first(cues.estimated_dynasty, 0, "Ancient Indian")
    iconography = _first(cues.iconography, 0, "religious")
    carving = _first(cues.carvings, 0, "decorative")
    alt_style = _first(cues.architectural_style, 1, "traditional")
    period = cues.estimated_period or "Medieval"
    alt_dynasty = _first(cues.estimated_dynasty, 1, "regional")

    templates = [
        f"{style} temple complex with {structure.lower()} in the gopuram tradition, "
        f"typical of South Indian sacred architecture",
        f"{material} {style} shrine combining {alt_style} elements with {iconography.lower()}",
        f"{dynasty} dynasty monument from the {period}, possibly with later {alt_dynasty} additions",
        f"Temple facade with {carving.lower()} in the {style} carving tradition",
        f"{dynasty} fortress or palace structure built in {material.lower()} with {structure.lower()}",
        f"{style} pilgrimage site of the {period} associated with {iconography.lower()}",
    ]
    hypotheses = templates[:TEMPLATE_HYPOTHESES]

    lowered = text.lower()
    for keyword, hypothesis in LOCATION_HYPOTHESES.items():
        if keyword in lowered:
            hypotheses.append(hypothesis)

    return hypotheses[:MAX_HYPOTHESES]
