"""Tests for the bilingual message catalog"""

from dataclasses import fields

import pytest

from vocab_cli.core.messages import (
    MESSAGES,
    MessageTemplates,
    get_messages,
    render,
    resolve_locale,
)
from vocab_cli.exceptions import UnsupportedLocaleError
from vocab_cli.models.vocab_entry import Locale


class TestMessageCatalog:
    """Test catalog completeness and lookup"""

    def test_every_locale_has_templates(self):
        """Each supported locale has a full template set"""
        assert set(MESSAGES) == set(Locale)
        for templates in MESSAGES.values():
            assert isinstance(templates, MessageTemplates)
            for f in fields(MessageTemplates):
                assert getattr(templates, f.name)

    def test_placeholders_match_across_locales(self):
        """Both locales use the same placeholders for each message"""
        for f in fields(MessageTemplates):
            en = getattr(MESSAGES[Locale.EN], f.name)
            vi = getattr(MESSAGES[Locale.VI], f.name)
            for placeholder in ("{word}", "{meaning}"):
                assert (placeholder in en) == (placeholder in vi), f.name

    def test_lookup_by_code(self):
        """String codes resolve to the same templates as enum members"""
        assert get_messages("vi") is MESSAGES[Locale.VI]
        assert get_messages(Locale.EN).list_title == "Vocabulary List:"
        assert get_messages("vi").quiz_correct == "Đúng!"

    @pytest.mark.parametrize("code", ["fr", "EN", "", "english"])
    def test_unknown_locale_rejected(self, code):
        """Codes outside the fixed set raise UnsupportedLocaleError"""
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            resolve_locale(code)

        assert exc_info.value.supported == ["en", "vi"]


class TestRender:
    """Test placeholder substitution"""

    def test_substitutes_word(self):
        assert (
            render(MESSAGES[Locale.EN].quiz_prompt, word="sun")
            == 'What is the meaning of "sun"?'
        )

    def test_substitutes_meaning(self):
        assert (
            render(MESSAGES[Locale.VI].quiz_wrong, meaning="mặt trời")
            == "Sai! Nghĩa đúng là: mặt trời"
        )

    def test_only_first_occurrence_replaced(self):
        assert render("{word} and {word}", word="x") == "x and {word}"

    def test_not_recursive(self):
        """A value containing a placeholder is inserted literally"""
        assert render("{word} / {meaning}", word="{meaning}", meaning="m") == (
            "{meaning} / m"
        )

    def test_missing_placeholder_left_untouched(self):
        assert render("Correct!", word="sun") == "Correct!"
        assert render("Word {word}") == "Word {word}"
