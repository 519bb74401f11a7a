from heritagelens.services.hashing import HASH_MODULUS, content_hash, pick


class TestContentHash:
    def test_empty_is_zero(self):
        assert content_hash("") == 0

    def test_single_character(self):
        assert content_hash("a") == 97

    def test_polynomial_accumulation(self):
        assert content_hash("ab") == 97 * 31 + 98

    def test_bytes_match_ascii_string(self):
        assert content_hash(b"heritage") == content_hash("heritage")

    def test_deterministic(self):
        payload = "/9j/4AAQSkZJRg" * 200
        assert content_hash(payload) == content_hash(payload)

    def test_wraps_to_32_bits(self):
        value = content_hash("z" * 5000)
        assert 0 <= value < HASH_MODULUS


class TestPick:
    def test_consecutive_entries_wrap(self):
        assert pick(["a", "b", "c"], 2, count=2) == ["c", "a"]

    def test_empty_vocabulary(self):
        assert pick([], 5, count=3) == []
