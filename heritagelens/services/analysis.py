"""Analysis providers and the request boundary that maps failures to results."""

import logging
import random
from abc import ABC, abstractmethod

from heritagelens.config import Settings, get_settings
from heritagelens.exceptions import (
    AnalysisError,
    AuthenticationError,
    ImageValidationError,
    NotHeritageError,
)
from heritagelens.models.analysis import (
    AgentAnalyses,
    AnalysisResult,
    AnalyzeRequest,
    ProviderStatus,
)
from heritagelens.services.agents import (
    architectural_analysis,
    cultural_analysis,
    verification_analysis,
)
from heritagelens.services.classifier import classify_heritage
from heritagelens.services.cues import CueExtractor, HashCueExtractor, render_visual_summary
from heritagelens.services.evidence import synthesize_evidence
from heritagelens.services.hashing import content_hash
from heritagelens.services.hypotheses import generate_hypotheses
from heritagelens.services.ranking import rank_interpretations
from heritagelens.services.validation import check_image, extract_payload

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Analysis failed. Please try again."


class AnalysisProvider(ABC):
    """Produces a heritage analysis for an already validated image."""

    name: str = "base"

    @abstractmethod
    def analyze(self, image: str, text: str = "") -> AnalysisResult:
        """Return a successful AnalysisResult or raise NotHeritageError / AnalysisError."""
        ...

    @abstractmethod
    def status(self) -> ProviderStatus:
        ...


class MockAnalysisProvider(AnalysisProvider):
    """Deterministic pipeline that derives every field from the image payload.

    Verification scores come from a generator seeded with ``seed`` when given,
    otherwise with the payload's content hash, so the same upload always gets
    the same ranking.
    """

    name = "mock"

    def __init__(self, cue_extractor: CueExtractor | None = None, seed: int | None = None):
        self.cue_extractor = cue_extractor or HashCueExtractor()
        self.seed = seed

    def analyze(self, image: str, text: str = "") -> AnalysisResult:
        payload = extract_payload(image)
        cues = self.cue_extractor.extract(payload)

        verdict = classify_heritage(cues, text)
        if not verdict.is_heritage:
            raise NotHeritageError(verdict.reason, keyword=verdict.keyword)

        hypotheses = generate_hypotheses(cues, text)
        evidence = synthesize_evidence(hypotheses, cues, text)

        rng = random.Random(self.seed if self.seed is not None else content_hash(payload))
        verification = verification_analysis(cues, hypotheses, evidence, rng)
        logger.debug("Generated %d hypotheses, scores=%s", len(hypotheses), list(verification.scores.values()))

        return AnalysisResult(
            is_valid=True,
            is_heritage=True,
            visual_analysis=render_visual_summary(cues, text),
            hypotheses=hypotheses,
            evidence=evidence,
            agent_analyses=AgentAnalyses(
                architectural=architectural_analysis(cues, hypotheses, evidence),
                cultural=cultural_analysis(cues, hypotheses, evidence),
                verification=verification.summary,
            ),
            ranked_interpretations=rank_interpretations(verification.scores),
        )

    def status(self) -> ProviderStatus:
        return ProviderStatus(
            provider=self.name,
            ready=True,
            message=f"Deterministic analysis using {self.cue_extractor.name} cue extraction",
        )


def get_analysis_provider(name: str, settings: Settings | None = None) -> AnalysisProvider:
    """Return a provider by name. The Gemini SDK is only imported when requested."""
    settings = settings or get_settings()
    if name == "mock":
        return MockAnalysisProvider(seed=settings.verification_seed)
    if name == "gemini":
        from heritagelens.services.gemini import GeminiAnalysisProvider, GeminiClient

        return GeminiAnalysisProvider(GeminiClient.from_settings(settings))
    raise ValueError(f"Unknown analysis provider: {name}")


def run_analysis(
    provider: AnalysisProvider,
    request: AnalyzeRequest,
    max_image_bytes: int | None = None,
) -> tuple[int, AnalysisResult]:
    """Validate, analyze and map every failure to (http_status, AnalysisResult)."""
    if max_image_bytes is None:
        max_image_bytes = get_settings().max_image_bytes
    validation = check_image(request.image, max_image_bytes)
    if not validation.valid:
        logger.info("Rejected image: %s", validation.error)
        return 400, AnalysisResult(is_valid=False, is_heritage=False, error=validation.error)

    try:
        result = provider.analyze(request.image, request.text)
    except NotHeritageError as e:
        logger.info("Provider %s rejected content: keyword=%r", provider.name, e.keyword)
        return 200, AnalysisResult(is_valid=True, is_heritage=False, error=e.reason)
    except ImageValidationError as e:
        return 400, AnalysisResult(is_valid=False, is_heritage=False, error=str(e))
    except AuthenticationError as e:
        logger.warning("Provider %s is not configured: %s", provider.name, e)
        return 500, AnalysisResult(is_valid=False, is_heritage=False, error=str(e))
    except AnalysisError as e:
        logger.warning("Provider %s failed: %s", provider.name, e)
        return 500, AnalysisResult(is_valid=False, is_heritage=False, error=GENERIC_FAILURE)
    except Exception:
        logger.exception("Unexpected analysis failure with provider %s", provider.name)
        return 500, AnalysisResult(is_valid=False, is_heritage=False, error=GENERIC_FAILURE)
    return 200, result
