"""Gemini-backed analysis provider: sends the image to Gemini for detection, then full analysis."""

import base64
import binascii
import json
import logging

import httpx
from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from heritagelens.config import Settings
from heritagelens.exceptions import (
    AuthenticationError,
    IntegrationError,
    InvalidImageFormatError,
    NotHeritageError,
    RateLimitError,
)
from heritagelens.models.analysis import (
    AgentAnalyses,
    AnalysisResult,
    NearbyHeritageSite,
    ProviderStatus,
    RankedInterpretation,
)
from heritagelens.services.analysis import AnalysisProvider
from heritagelens.services.agents import CONFIDENCE_CEILING, CONFIDENCE_FLOOR
from heritagelens.services.ranking import MAX_RANKED
from heritagelens.services.validation import extract_mime_type, extract_payload

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DETECT_MAX_TOKENS = 200
ANALYZE_MAX_TOKENS = 4000

DETECT_PROMPT = """You are an expert in Indian heritage, monuments, temples, sculptures, and artifacts. Analyze this image carefully.

TASK: Determine if this image contains Indian heritage (temples, monuments, sculptures, artifacts, historical buildings, inscriptions, carvings, architectural elements).

ACCEPT IF:
- Image shows Indian temples, monuments, sculptures, or artifacts (even if people are visible)
- Image shows historical buildings, forts, palaces
- Image shows carved reliefs, inscriptions, or architectural details

REJECT ONLY IF:
- Image is primarily of modern buildings/houses without heritage value
- Image is anime/cartoon/artwork/digital art
- Image is animals or nature landscapes without heritage structures
- Image is too unclear or damaged to identify heritage elements
- Image is primarily of people/portraits without heritage context

USER CONTEXT: {context}

Respond ONLY with valid JSON:
{{"is_heritage": boolean, "reason": "Brief explanation if not heritage or what was detected if heritage"}}"""

ANALYZE_PROMPT = """You are an expert in Indian heritage architecture, history, and cultural analysis. Analyze this image of an Indian heritage site/monument in detail, focusing on the heritage elements visible.

USER CONTEXT: {context}

Respond ONLY with valid JSON using this structure:
{{
  "visual_analysis": "Architectural style, materials, structures, iconography, carvings, inscriptions, estimated period and likely dynasties",
  "hypotheses": ["hypothesis 1", "hypothesis 2", "hypothesis 3", "hypothesis 4", "hypothesis 5"],
  "evidence": "Historical background, architectural comparisons, cultural themes, dynastic information and related monuments",
  "architectural_analysis": "Structural style, building material, dynasty/period traits and comparisons to known monuments",
  "cultural_analysis": "Mythology, symbolism, religious context, ritual function and cultural meaning",
  "verification_analysis": "Which hypotheses are most likely, factual consistency checking, confidence assessment",
  "ranked_interpretations": [
    {{"rank": 1, "hypothesis": "Most likely identification", "confidence": 90, "summary": "Why this is the best match", "narrative": "If this belongs to [dynasty], then it likely represents..."}}
  ],
  "nearby_heritage_sites": [
    {{"name": "Site name", "location": "City/Region", "distance_km": 50, "description": "Significance", "why_visit": "Why it complements the identified monument", "period": "Historical period"}}
  ]
}}

IMPORTANT:
- Provide real historical information about Indian monuments and dynasties
- Give exactly five ranked interpretations with confidence scores between 50 and 95
- Recommend 2-5 real heritage sites within 150 km of the identified monument"""


def extract_json(text: str) -> dict:
    """Parse a JSON object from model output, unwrapping markdown fences."""
    json_text = text
    if "```json" in text:
        json_text = text.split("```json", 1)[1].split("```", 1)[0]
    elif "```" in text:
        json_text = text.split("```", 1)[1].split("```", 1)[0]
    try:
        data = json.loads(json_text.strip())
    except json.JSONDecodeError as e:
        raise IntegrationError(f"Gemini returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise IntegrationError("Gemini response is not a JSON object")
    return data


class GeminiClient:
    """Thin wrapper over google-genai carrying its own key, model, timeout and retry budget."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 60.0,
        max_retries: int = 1,
        client: genai.Client | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
            max_retries=settings.gemini_max_retries,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key) or self._client is not None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise AuthenticationError(
                    "Gemini API key not configured. Get one at "
                    "https://aistudio.google.com/apikey and set GEMINI_API_KEY in .env"
                )
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
        return self._client

    def generate_json(self, image_bytes: bytes, mime_type: str, prompt: str, max_tokens: int) -> dict:
        """Send image + prompt, retrying transient failures, and parse the JSON reply."""
        client = self._get_client()
        config = types.GenerateContentConfig(
            temperature=0.7,
            top_k=40,
            top_p=0.95,
            max_output_tokens=max_tokens,
        )
        contents = [types.Part.from_bytes(data=image_bytes, mime_type=mime_type), prompt]

        attempt = 0
        while True:
            try:
                response = client.models.generate_content(model=self.model, contents=contents, config=config)
                break
            except errors.ClientError as e:
                if e.code in (401, 403):
                    raise AuthenticationError("Gemini API key is invalid. Check GEMINI_API_KEY in .env.") from e
                if e.code == 429:
                    raise RateLimitError("Gemini rate limit exceeded.") from e
                raise IntegrationError(f"Gemini API error ({e.code}): {e.message}") from e
            except (errors.ServerError, httpx.TransportError) as e:
                if attempt >= self.max_retries:
                    raise IntegrationError(f"Gemini request failed: {e}") from e
                attempt += 1
                logger.warning("Gemini request failed (%s), retrying (%d/%d)", e, attempt, self.max_retries)

        return extract_json(response.text or "")

    def detect(self, image_bytes: bytes, mime_type: str, context: str) -> dict:
        prompt = DETECT_PROMPT.format(context=context or "No additional context provided")
        return self.generate_json(image_bytes, mime_type, prompt, DETECT_MAX_TOKENS)

    def analyze(self, image_bytes: bytes, mime_type: str, context: str) -> dict:
        prompt = ANALYZE_PROMPT.format(context=context or "No additional context provided")
        return self.generate_json(image_bytes, mime_type, prompt, ANALYZE_MAX_TOKENS)


def normalize_interpretations(raw: list[dict]) -> list[RankedInterpretation]:
    """Clamp remote confidences, re-sort descending and re-rank the top five."""
    entries = []
    for item in raw:
        confidence = int(round(float(item.get("confidence", CONFIDENCE_FLOOR))))
        entries.append({
            "hypothesis": str(item.get("hypothesis", "")),
            "confidence": max(CONFIDENCE_FLOOR, min(CONFIDENCE_CEILING, confidence)),
            "summary": str(item.get("summary", "")),
            "narrative": str(item.get("narrative", "")),
        })
    entries.sort(key=lambda e: e["confidence"], reverse=True)
    return [
        RankedInterpretation(rank=position + 1, **entry)
        for position, entry in enumerate(entries[:MAX_RANKED])
    ]


def _require_content(result: AnalysisResult) -> None:
    """Reject remote results whose analysis fields are missing or blank."""
    agents = result.agent_analyses
    texts = [result.visual_analysis, result.evidence, agents.architectural, agents.cultural, agents.verification]
    if any(not (t or "").strip() for t in texts):
        raise IntegrationError("Gemini analysis response has blank sections")
    if not result.hypotheses or any(not h.strip() for h in result.hypotheses):
        raise IntegrationError("Gemini analysis response has no hypotheses")
    if not result.ranked_interpretations:
        raise IntegrationError("Gemini analysis response has no ranked interpretations")


class GeminiAnalysisProvider(AnalysisProvider):
    name = "gemini"

    def __init__(self, client: GeminiClient):
        self.client = client

    def analyze(self, image: str, text: str = "") -> AnalysisResult:
        try:
            image_bytes = base64.b64decode(extract_payload(image), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidImageFormatError("Invalid image format") from e
        mime_type = extract_mime_type(image)

        verdict = self.client.detect(image_bytes, mime_type, text)
        if not verdict.get("is_heritage"):
            raise NotHeritageError(verdict.get("reason") or "No Indian heritage elements were detected.")

        data = self.client.analyze(image_bytes, mime_type, text)
        try:
            result = AnalysisResult(
                is_valid=True,
                is_heritage=True,
                visual_analysis=data["visual_analysis"],
                hypotheses=data["hypotheses"],
                evidence=data["evidence"],
                agent_analyses=AgentAnalyses(
                    architectural=data["architectural_analysis"],
                    cultural=data["cultural_analysis"],
                    verification=data["verification_analysis"],
                ),
                ranked_interpretations=normalize_interpretations(data.get("ranked_interpretations") or []),
                nearby_heritage_sites=[
                    NearbyHeritageSite.model_validate(site)
                    for site in data.get("nearby_heritage_sites") or []
                ] or None,
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise IntegrationError(f"Gemini analysis response is incomplete: {e}") from e
        _require_content(result)
        return result

    def status(self) -> ProviderStatus:
        if not self.client.configured:
            return ProviderStatus(
                provider=self.name,
                ready=False,
                message="Set GEMINI_API_KEY in .env to enable Gemini analysis",
            )
        return ProviderStatus(provider=self.name, ready=True, message=f"Using model {self.client.model}")
