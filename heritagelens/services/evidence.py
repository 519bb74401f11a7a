from heritagelens.models.analysis import VisualCues

NO_CONTEXT_INSIGHT = (
    "No location details were supplied; regional attribution relies on visual "
    "cues alone and should be confirmed against site records."
)


def synthesize_evidence(hypotheses: list[str], cues: VisualCues, text: str = "") -> str:
    """Six-section evidence narrative.

    Only the location section varies, quoting the user's context when given.
    """
    context = text.strip()
    location_insight = (
        f'The provided context "{context}" narrows the likely region and should be '
        f"weighed against the architectural evidence above."
        if context
        else NO_CONTEXT_INSIGHT
    )

    sections = [
        (
            "Architectural Matching",
            "The observed structural vocabulary matches documented temple and palace forms "
            "of the Indian subcontinent, where plan, elevation and ornament follow regional "
            "building treatises such as the Manasara and Mayamata.",
        ),
        (
            "Historical Context",
            "Monuments of this type were commissioned by ruling dynasties and merchant guilds "
            "as expressions of piety and political legitimacy, often expanded over several "
            "centuries of patronage.",
        ),
        (
            "Comparative Sites",
            "Comparable examples include the Brihadeeswarar Temple at Thanjavur, the "
            "Chennakeshava Temple at Belur, the Kandariya Mahadeva Temple at Khajuraho and "
            "the Shore Temple at Mamallapuram.",
        ),
        (
            "Cultural Significance",
            "Such sites served as ritual centres, pilgrimage destinations and patrons of "
            "music, dance and scholarship, anchoring the social life of their regions.",
        ),
        ("Location-Specific Insights", location_insight),
        (
            "Dynastic Attribution",
            "Dynastic attribution rests on stylistic markers, inscriptions and construction "
            "technique; epigraphic confirmation is recommended before firm dating.",
        ),
    ]
    return "\n\n".join(f"{title}:\n{body}" for title, body in sections)
