"""Tests for Juniper Type 9 decoder."""

import random
import pytest
from shared.domain.consts import FailureReason
from shared.domain.errors import EncodeError, MalformedInputError
from shared.implementations.decoders import JuniperType9Decoder


class TestJuniperTables:
    """Tests for the fixed alphabet and encoding tables."""

    def test_alphabet_is_concatenation_of_families(self):
        """Test the exact alphabet and its length."""
        assert JuniperType9Decoder.ALPHABET == (
            "QzF3n6/9CAtpu0O" + "B1IREhcSyrleKvMW8LXx" + "7N-dVbwsY2g4oaJZGUDj" + "iHkq.mPf5T"
        )
        assert len(JuniperType9Decoder.ALPHABET) == 65

    def test_alphabet_has_no_duplicates(self):
        """Test that every character has a single position."""
        assert len(set(JuniperType9Decoder.ALPHABET)) == len(JuniperType9Decoder.ALPHABET)

    @pytest.mark.parametrize("char,family", [
        ("Q", 3), ("O", 3),
        ("B", 2), ("x", 2),
        ("7", 1), ("j", 1),
        ("i", 0), ("T", 0),
    ])
    def test_family_index(self, char, family):
        """Test that the first substring is family 3 and the last is family 0."""
        assert JuniperType9Decoder.EXTRA[char] == family

    def test_encoding_rows(self):
        """Test the exact encoding table."""
        assert JuniperType9Decoder.ENCODING == (
            (1, 4, 32),
            (1, 16, 32),
            (1, 8, 32),
            (1, 64),
            (1, 32),
            (1, 4, 16, 128),
            (1, 32, 64),
        )


class TestJuniperGap:
    """Tests for gap arithmetic at its boundaries."""

    def test_adjacent_characters_gap_zero(self):
        """Test that consecutive alphabet characters give gap 0."""
        assert JuniperType9Decoder.gap("Q", "z") == 0

    def test_same_character_gap_minus_one(self):
        """Test that a repeated character gives gap -1."""
        assert JuniperType9Decoder.gap("Q", "Q") == -1
        assert JuniperType9Decoder.gap("T", "T") == -1

    def test_wrap_from_last_to_first(self):
        """Test that moving from the last to the first character wraps to gap 0."""
        assert JuniperType9Decoder.gap("T", "Q") == 0

    def test_backwards_step_is_maximum_gap(self):
        """Test that stepping back one position gives the largest gap."""
        assert JuniperType9Decoder.gap("z", "Q") == 63

    def test_wrap_with_offset(self):
        """Test a wrapped gap from position 62 to position 0."""
        assert JuniperType9Decoder.gap("f", "Q") == 2

    def test_gap_range(self):
        """Test that every gap falls in [-1, 63]."""
        alphabet = JuniperType9Decoder.ALPHABET
        gaps = {JuniperType9Decoder.gap(a, b) for a in alphabet for b in alphabet}
        assert min(gaps) == -1
        assert max(gaps) == 63


class TestJuniperType9Decode:
    """Tests for Juniper Type 9 decoding."""

    def test_decode_without_padding(self, juniper):
        """Test a family-0 salt, where no padding follows the salt."""
        assert juniper.decode("$9$ikqfQz6AtO") == "abc"

    def test_decode_with_padding(self, juniper):
        """Test a family-3 salt, where three padding characters are skipped."""
        assert juniper.decode("$9$QabcF39") == "a"

    def test_padding_content_is_ignored(self, juniper):
        """Test that padding characters do not affect the result."""
        assert juniper.decode("$9$QTTTF39") == "a"

    def test_salt_and_padding_only_decodes_to_empty(self, juniper):
        """Test that no data characters give an empty plaintext."""
        assert juniper.decode("$9$i") == ""

    @pytest.mark.parametrize("encoded", [
        "",
        "9$ikqf",
        "$8$ikqf",
        "$9",
        "ikqfQz6AtO",
        " $9$ikqf",
    ])
    def test_missing_prefix_rejected(self, juniper, encoded):
        """Test that anything not starting with '$9$' is rejected."""
        with pytest.raises(MalformedInputError, match=r"not a valid Juniper Type 9 password"):
            juniper.decode(encoded)

    def test_prefix_only_rejected(self, juniper):
        """Test that '$9$' with nothing after it is rejected."""
        with pytest.raises(MalformedInputError, match=FailureReason.INVALID_JUNIPER_TYPE9):
            juniper.decode("$9$")

    def test_unknown_character_rejected(self, juniper):
        """Test that characters outside the alphabet fail instead of counting as zero."""
        with pytest.raises(MalformedInputError, match=FailureReason.INVALID_JUNIPER_CHARACTER):
            juniper.decode("$9$ik!f")

    def test_truncated_row_rejected(self, juniper):
        """Test that running out of characters mid-row fails."""
        with pytest.raises(MalformedInputError, match=FailureReason.TRUNCATED_JUNIPER_TYPE9):
            juniper.decode("$9$ikq")

    def test_truncated_padding_rejected(self, juniper):
        """Test that fewer padding characters than the salt family requires fails."""
        with pytest.raises(MalformedInputError, match=FailureReason.TRUNCATED_JUNIPER_TYPE9):
            juniper.decode("$9$Qab")

    def test_truncated_after_valid_character_rejected(self, juniper):
        """Test that a trailing partial row fails rather than returning 'abc'."""
        with pytest.raises(MalformedInputError, match=FailureReason.TRUNCATED_JUNIPER_TYPE9):
            juniper.decode("$9$ikqfQz6AtOz")

    def test_repeated_characters_rejected(self, juniper):
        """Test that gap -1 leading to a negative character code fails."""
        with pytest.raises(MalformedInputError, match="decodes to -37"):
            juniper.decode("$9$iiii")


class TestJuniperType9Encode:
    """Tests for Juniper Type 9 encoding."""

    def test_encode_known_vector(self, juniper):
        """Test that a fixed salt reproduces the known vector."""
        assert juniper.encode("abc", salt="i", padding="") == "$9$ikqfQz6AtO"
        assert juniper.encode("a", salt="Q", padding="abc") == "$9$QabcF39"

    def test_encode_random_salt_has_matching_padding(self):
        """Test that random salt is followed by family-index padding characters."""
        decoder = JuniperType9Decoder(rng=random.Random(1234))
        encoded = decoder.encode("juniper")
        salt = encoded[3]
        assert encoded.startswith("$9$")
        assert decoder.decode(encoded) == "juniper"
        # 7 characters use rows 0..6: 3+3+3+2+2+4+3 data characters
        assert len(encoded) == 3 + 1 + JuniperType9Decoder.EXTRA[salt] + 20

    @pytest.mark.parametrize("plaintext", [
        "a",
        "Juniper123!",
        "long passphrase covering every encoding row twice",
        "".join(chr(c) for c in range(32, 127)),
        "\x00\x01\xfe\xff",
    ])
    def test_round_trip(self, plaintext):
        """Test that decode(encode(p)) == p for every row and byte value."""
        decoder = JuniperType9Decoder(rng=random.Random(42))
        for _ in range(5):
            assert decoder.decode(decoder.encode(plaintext)) == plaintext

    @pytest.mark.parametrize("salt", list("QOBx7jiT"))
    def test_round_trip_every_family(self, juniper, salt):
        """Test round-trip with salts from every family."""
        padding = "z" * JuniperType9Decoder.EXTRA[salt]
        encoded = juniper.encode("secret", salt=salt, padding=padding)
        assert juniper.decode(encoded) == "secret"

    def test_encode_rejects_invalid_salt(self, juniper):
        """Test that salts outside the alphabet are rejected."""
        with pytest.raises(EncodeError):
            juniper.encode("a", salt="!")
        with pytest.raises(EncodeError):
            juniper.encode("a", salt="ab")

    def test_encode_rejects_wrong_padding_length(self, juniper):
        """Test that padding must match the salt's family index."""
        with pytest.raises(EncodeError, match="Padding"):
            juniper.encode("a", salt="Q", padding="ab")

    def test_encode_rejects_multibyte_characters(self, juniper):
        """Test that characters above 0xFF cannot be encoded."""
        with pytest.raises(EncodeError, match="single-byte"):
            juniper.encode("€", salt="i", padding="")
