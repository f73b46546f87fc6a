"""Tests for confirmation code generation."""

import string

import pytest

from app.utils.string_utils import (
    CONFIRMATION_CODE_ALPHABET,
    CodeGenerator,
    StringHelper,
    generate_confirmation_code,
)


class TestConfirmationCode:
    def test_default_length_is_ten(self):
        assert len(generate_confirmation_code()) == 10

    def test_only_alphanumeric_characters(self):
        allowed = set(string.ascii_letters + string.digits)
        for _ in range(200):
            assert set(generate_confirmation_code()) <= allowed

    def test_alphabet_has_62_symbols(self):
        assert len(CONFIRMATION_CODE_ALPHABET) == 62
        assert len(set(CONFIRMATION_CODE_ALPHABET)) == 62

    def test_ten_thousand_codes_are_distinct(self):
        codes = {generate_confirmation_code() for _ in range(10_000)}
        assert len(codes) == 10_000

    def test_custom_length(self):
        assert len(CodeGenerator.confirmation_code(16)) == 16

    @pytest.mark.parametrize("length", [0, -3])
    def test_non_positive_length_rejected(self, length):
        with pytest.raises(ValueError):
            CodeGenerator.random_string(length)

    @pytest.mark.parametrize("length", [0, -1])
    def test_explicit_non_positive_code_length_rejected(self, length):
        with pytest.raises(ValueError):
            generate_confirmation_code(length)

    def test_random_string_respects_charset(self):
        assert set(CodeGenerator.random_string(50, charset="ab")) <= {"a", "b"}


class TestMaskEmail:
    def test_masks_local_part(self):
        assert StringHelper.mask_email("jane.doe@example.com") == "ja******@example.com"

    def test_short_local_part(self):
        assert StringHelper.mask_email("j@example.com") == "j*@example.com"

    def test_not_an_email(self):
        assert StringHelper.mask_email("nobody") == "nobody"
