from heritagelens.services.cues import (
    ARCHITECTURAL_STYLES,
    DYNASTIES,
    MATERIALS,
    PERIODS,
    STRUCTURES,
    HashCueExtractor,
    render_visual_summary,
)
from conftest import EMPTY_CUES, EMPTY_PAYLOAD_CUES, JPEG_PAYLOAD


class TestHashCueExtractor:
    def test_empty_payload_uses_first_entries(self):
        assert HashCueExtractor().extract("") == EMPTY_PAYLOAD_CUES

    def test_single_style_when_hash_not_divisible_by_three(self):
        # hash("a") == 97 -> 97 % 8 == 1, 97 % 3 == 1
        cues = HashCueExtractor().extract("a")
        assert cues.architectural_style == ["Nagara"]

    def test_second_style_when_hash_divisible_by_three(self):
        # hash("c") == 99 -> 99 % 8 == 3, 99 % 3 == 0, (99 + 1) % 8 == 4
        cues = HashCueExtractor().extract("c")
        assert cues.architectural_style == ["Hoysala", "Pallava"]

    def test_short_payload_truncates_windows(self):
        cues = HashCueExtractor().extract("a")
        assert cues.materials == ["Granite", "Sandstone"]
        assert cues.estimated_period == PERIODS[0]

    def test_materials_window_starts_at_offset_100(self):
        # materials window is "b" -> 98 % 5 == 3
        cues = HashCueExtractor().extract("a" * 100 + "b")
        assert cues.materials == ["Soapstone", "Limestone"]
        assert cues.structures == STRUCTURES[:3]

    def test_entry_counts(self):
        cues = HashCueExtractor().extract(JPEG_PAYLOAD)
        assert 1 <= len(cues.architectural_style) <= 2
        assert len(cues.materials) == 2
        assert len(cues.structures) == 3
        assert len(cues.iconography) == 2
        assert len(cues.carvings) == 2
        assert len(cues.estimated_dynasty) == 2

    def test_values_come_from_vocabularies(self):
        cues = HashCueExtractor().extract(JPEG_PAYLOAD * 10)
        assert set(cues.architectural_style) <= set(ARCHITECTURAL_STYLES)
        assert set(cues.materials) <= set(MATERIALS)
        assert cues.estimated_period in PERIODS
        assert set(cues.estimated_dynasty) <= set(DYNASTIES)

    def test_deterministic(self):
        extractor = HashCueExtractor()
        assert extractor.extract(JPEG_PAYLOAD) == extractor.extract(JPEG_PAYLOAD)


class TestRenderVisualSummary:
    def test_includes_cues_and_context(self):
        summary = render_visual_summary(EMPTY_PAYLOAD_CUES, "Near Thanjavur")
        assert "Dravidian, Nagara" in summary
        assert "7th-8th Century CE" in summary
        assert "Near Thanjavur" in summary

    def test_empty_cues_fall_back(self):
        summary = render_visual_summary(EMPTY_CUES)
        assert "Classical/Traditional" in summary
        assert "No additional context provided" in summary
