"""Testes para app.services.phone_normalizer."""

from __future__ import annotations

import random
import string

import pytest

from app.services.phone_normalizer import PhoneNormalizer, clean_phone_text, normalize

_RNG = random.Random(963)


def _digits(prefix: str, length: int, count: int = 200) -> list[str]:
    return [
        prefix + "".join(_RNG.choices(string.digits, k=length - len(prefix)))
        for _ in range(count)
    ]


NATIONAL_MOBILE_INPUTS = _digits("09", 10)
SUBSCRIBER_INPUTS = _digits("9", 9)
NATIONAL_INPUTS = _digits("0", 10)


class TestCleanPhoneText:
    """Testes para clean_phone_text."""

    def test_removes_spaces_hyphens_and_parentheses(self) -> None:
        assert clean_phone_text(" (093) 312-34 56 ") == "0933123456"

    def test_none_becomes_empty(self) -> None:
        assert clean_phone_text(None) == ""

    def test_keeps_plus_sign(self) -> None:
        assert clean_phone_text("+963 933 123 456") == "+963933123456"


class TestNormalize:
    """Regras de reescrita para o formato internacional."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0933123456", "+963933123456"),
            ("933123456", "+963933123456"),
            ("0112345678", "+963112345678"),
            ("+963933123456", "+963933123456"),
            ("963933123456", "+963933123456"),
            ("093-312-3456", "+963933123456"),
            ("(011) 234 5678", "+963112345678"),
        ],
    )
    def test_canonical_forms(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    @pytest.mark.parametrize("raw", NATIONAL_MOBILE_INPUTS)
    def test_national_mobile_form_drops_zero(self, raw: str) -> None:
        result = normalize(raw)

        assert result == "+963" + raw[1:]
        assert normalize(result) == result

    @pytest.mark.parametrize("raw", SUBSCRIBER_INPUTS)
    def test_subscriber_form_gets_country_code(self, raw: str) -> None:
        result = normalize(raw)

        assert result == "+963" + raw
        assert normalize(result) == result

    @pytest.mark.parametrize("raw", NATIONAL_INPUTS)
    def test_any_national_form_drops_zero(self, raw: str) -> None:
        result = normalize(raw)

        assert result == "+963" + raw[1:]
        assert normalize(result) == result

    def test_idempotent_on_canonical_number(self) -> None:
        """Aplicar duas vezes dá o mesmo resultado."""
        once = normalize("0944123456")
        assert normalize(once) == once

    def test_unmatched_text_returned_cleaned(self) -> None:
        """Texto sem regra aplicável volta limpo, sem exceção."""
        assert normalize("hello world") == "helloworld"

    def test_empty_input_returns_empty_string(self) -> None:
        assert normalize("") == ""
        assert normalize(None) == ""

    def test_nine_digits_not_starting_with_nine_unchanged(self) -> None:
        assert normalize("112345678") == "112345678"

    def test_foreign_international_number_unchanged(self) -> None:
        assert normalize("+12015550123") == "+12015550123"

    def test_international_double_zero_prefix(self) -> None:
        assert normalize("00963933123456") == "+963933123456"
        assert normalize("00 963 11 234 5678") == "+963112345678"

    def test_double_zero_other_country_unchanged(self) -> None:
        assert normalize("0012015550123") == "0012015550123"

    def test_arabic_indic_digits(self) -> None:
        assert normalize("\u0660\u0669\u0663\u0663\u0661\u0662\u0663\u0664\u0665\u0666") == (
            "+963933123456"
        )

    def test_persian_digits(self) -> None:
        assert clean_phone_text("\u06f0\u06f9\u06f4\u06f4") == "0944"

    def test_custom_country_code(self) -> None:
        assert normalize("0933123456", country_code="44") == "+44933123456"


class TestPhoneNormalizer:
    """Testes para a classe PhoneNormalizer."""

    def test_default_country_code(self) -> None:
        normalizer = PhoneNormalizer()
        assert normalizer.country_code == "963"
        assert normalizer.normalize("933123456") == "+963933123456"

    def test_delegates_to_normalize(self) -> None:
        normalizer = PhoneNormalizer("963")
        assert normalizer.normalize(" 0112345678 ") == normalize("0112345678")
