"""Bilingual message catalog"""

import re
from dataclasses import dataclass

from ..exceptions import UnsupportedLocaleError
from ..models.vocab_entry import Locale


@dataclass(frozen=True)
class MessageTemplates:
    """Named user-facing messages for a single locale"""

    add_success: str
    no_words: str
    list_title: str
    quiz_prompt: str  # {word}
    quiz_correct: str
    quiz_wrong: str  # {meaning}
    delete_success: str  # {word}
    no_word_found: str


MESSAGES: dict[Locale, MessageTemplates] = {
    Locale.EN: MessageTemplates(
        add_success="Word added successfully!",
        no_words="No words found in the vocabulary.",
        list_title="Vocabulary List:",
        quiz_prompt='What is the meaning of "{word}"?',
        quiz_correct="Correct!",
        quiz_wrong="Wrong! The correct meaning is: {meaning}",
        delete_success='Word "{word}" deleted.',
        no_word_found="Word not found.",
    ),
    Locale.VI: MessageTemplates(
        add_success="Từ đã được thêm thành công!",
        no_words="Không tìm thấy từ nào trong danh sách.",
        list_title="Danh sách từ vựng:",
        quiz_prompt='Nghĩa của từ "{word}" là gì?',
        quiz_correct="Đúng!",
        quiz_wrong="Sai! Nghĩa đúng là: {meaning}",
        delete_success='Từ "{word}" đã được xóa.',
        no_word_found="Không tìm thấy từ.",
    ),
}

MISSING_ADD_INPUT = "Please provide word, Vietnamese meaning, and English meaning."

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def resolve_locale(locale: Locale | str) -> Locale:
    """Coerce a locale code to Locale, rejecting unknown codes"""
    try:
        return Locale(locale)
    except ValueError:
        raise UnsupportedLocaleError(locale, Locale.codes()) from None


def get_messages(locale: Locale | str) -> MessageTemplates:
    """Get the message templates for a locale"""
    return MESSAGES[resolve_locale(locale)]


def render(template: str, **values: str) -> str:
    """Substitute {name} placeholders in a template.

    Only the first occurrence of each placeholder is replaced and values are
    inserted literally in a single pass, so a value that itself contains a
    placeholder is not expanded again.
    """
    pending = dict(values)

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in pending:
            return pending.pop(name)
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)
