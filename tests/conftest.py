import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from heritagelens.models.analysis import VisualCues


# --- Canned payloads ---

# Truncated JPEG header; the mock pipeline never decodes it.
JPEG_PAYLOAD = "/9j/4AAQSkZJRgABAQEASABIAAD/2wBDAAYEBQYFBAYGBQYHBwYIChAKCgkJChQODwwQFxQYGBcUFhYaHSUfGhsjHBYWICwgIyYnKSopGR8tMC0oMCUoKSj/2wBDAQcHBwoIChMKChMoGhYaKCgoKCgoKCgo"
JPEG_DATA_URL = f"data:image/jpeg;base64,{JPEG_PAYLOAD}"

# base64("hello heritage")
DECODABLE_DATA_URL = "data:image/png;base64,aGVsbG8gaGVyaXRhZ2U="

TEXT_DATA_URL = "data:text/plain;base64,abc"

# Cues the hash extractor yields for an empty payload (every window hashes to 0).
EMPTY_PAYLOAD_CUES = VisualCues(
    architectural_style=["Dravidian", "Nagara"],
    materials=["Granite", "Sandstone"],
    structures=["Gopurams", "Pillars with lotus capitals", "Barrel-vaulted roofs"],
    iconography=["Divine deities in relief", "Mythological narratives"],
    carvings=["High-relief carvings", "Intricate stone work"],
    estimated_period="7th-8th Century CE",
    estimated_dynasty=["Pallava", "Chola"],
)

EMPTY_CUES = VisualCues(
    architectural_style=[],
    materials=[],
    structures=[],
    iconography=[],
    carvings=[],
    estimated_period="",
    estimated_dynasty=[],
)

GEMINI_ANALYSIS = {
    "visual_analysis": "Dravidian gopuram in granite with stucco figures.",
    "hypotheses": ["Virupaksha Temple, Hampi", "Vitthala Temple, Hampi"],
    "evidence": "Vijayanagara gopurams share this tiered form.",
    "architectural_analysis": "Tiered gopuram typical of Vijayanagara builders.",
    "cultural_analysis": "Dedicated to Shiva as Virupaksha.",
    "verification_analysis": "Consistent with 15th century Vijayanagara work.",
    "ranked_interpretations": [
        {"rank": 1, "hypothesis": "Vitthala Temple, Hampi", "confidence": 70,
         "summary": "Similar mandapa", "narrative": "Built under Devaraya II."},
        {"rank": 2, "hypothesis": "Virupaksha Temple, Hampi", "confidence": 99,
         "summary": "Matching gopuram", "narrative": "Active since the 7th century."},
        {"rank": 3, "hypothesis": "Hazara Rama Temple", "confidence": 40,
         "summary": "Royal chapel", "narrative": "Ramayana friezes."},
    ],
    "nearby_heritage_sites": [
        {"name": "Badami Cave Temples", "location": "Badami, Karnataka", "distance_km": 140,
         "description": "Chalukya rock-cut caves", "why_visit": "Earlier Deccan style",
         "period": "6th Century CE"},
    ],
}


@pytest.fixture
def mock_genai_client():
    """Stand-in for google.genai.Client; configure models.generate_content per test."""
    return MagicMock()


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from heritagelens.main import api
    return TestClient(api)
