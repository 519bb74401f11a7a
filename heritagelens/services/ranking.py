from heritagelens.models.analysis import RankedInterpretation

MAX_RANKED = 5


def _summary(hypothesis: str, confidence: int) -> str:
    return (
        f"{hypothesis} is supported with {confidence}% confidence based on agreement "
        f"between the detected architectural style, materials and period markers."
    )


def _narrative(hypothesis: str) -> str:
    return (
        f"Read as \"{hypothesis}\", the monument likely served as a centre of worship and royal "
        f"patronage, where artisan guilds recorded the myths, rituals and political "
        f"ambitions of its builders in stone. Its spaces would have hosted festivals, "
        f"pilgrim gatherings and the daily rites that sustained the surrounding community."
    )


def rank_interpretations(scores: dict[str, int], limit: int = MAX_RANKED) -> list[RankedInterpretation]:
    """Order hypotheses by confidence, highest first.

    ``sorted`` is stable, so equal confidences keep the mapping's insertion
    order, which is the order the hypotheses were generated in.
    """
    ordered = sorted(scores.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [
        RankedInterpretation(
            rank=position + 1,
            hypothesis=hypothesis,
            confidence=confidence,
            summary=_summary(hypothesis, confidence),
            narrative=_narrative(hypothesis),
        )
        for position, (hypothesis, confidence) in enumerate(ordered)
    ]
