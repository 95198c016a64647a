"""Läsbarhetsindex (LIX) and word variation index (OVIX) scoring.

LIX estimates how hard a text is to read from its average sentence length and
the share of long words::

    LIX = words / sentences + 100 * long_words / words

OVIX measures vocabulary variation::

    OVIX = ln(words) / ln(2 - ln(unique_words) / ln(words))

What counts as a long word depends on the language; the word length table is
based on research by Diuna and Kamila Marzęcka (SWPS University) and closely
matches the figure suggested by Carl-Hugo Björnsson.

See https://en.wikipedia.org/wiki/Lix_(readability_test)

Example:
    >>> from a11ykit.readability import Readability
    >>> Readability("Drink this medicine, please. Thank you.").LIX
    36
    >>> Readability("Drink this medicine, please.", lang="pl").wlong
    7
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

__all__ = ["LANGUAGES", "Readability", "SampleSizeError", "ScoredItem"]

logger = logging.getLogger(__name__)

# language subtag with an optional region subtag, e.g. "en" or "en-gb"
_LANGTAG = re.compile(r"^([a-z]{2})(-[a-z]{2})?$", re.IGNORECASE)
_SENTENCE_BREAK = re.compile(r"[:.]")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

MIN_WORDS = 5


class Language(NamedTuple):
    name: str
    l10n: str
    word_length: float


# Average characters per word by ISO 639-1 code.
LANGUAGES: dict[str, Language] = {
    "ar": Language("Arabic", "العربية", 6.03),
    "cs": Language("Czech", "Český", 6.02),
    "da": Language("Danish", "Dansk", 5.48),
    "de": Language("German", "Deutsch", 6.03),
    "el": Language("Greek", "Ελληνικά", 6.47),
    "en": Language("English", "English", 6.08),
    "es": Language("Spanish", "Español", 5.71),
    "et": Language("Estonian", "Eesti", 7.3),
    "eu": Language("Basque", "Euskara", 6.51),
    "fi": Language("Finnish", "Suomi", 7.55),
    "fr": Language("French", "Français", 5.39),
    "hr": Language("Croatian", "Hrvatski Jezik", 5.58),
    "hu": Language("Hungarian", "Magyar", 6.48),
    "is": Language("Icelandic", "Íslenska", 5.97),
    "it": Language("Italian", "Italiano", 5.95),
    "lt": Language("Lithuanian", "Lietuvių Kalba", 6.85),
    "lv": Language("Latvian", "Latviešu Valoda", 7.14),
    "nb": Language("Norwegian Bokmål", "Norsk Bokmål", 5.37),
    "nl": Language("Dutch", "Nederlands", 6.48),
    "nn": Language("Norwegian Nynorsk", "Norsk Nynorsk", 5.37),
    "no": Language("Norwegian", "Norsk", 5.37),
    "pl": Language("Polish", "Język Polski", 7.21),
    "pt": Language("Portuguese", "Português", 5.66),
    "ro": Language("Romanian", "Română", 6.49),
    "ru": Language("Russian", "Русский", 6.06),
    "sk": Language("Slovak", "Slovenčina", 6.35),
    "sq": Language("Albanian", "Shqip", 6.35),
    "sv": Language("Swedish", "Svenska", 5.97),
    "tr": Language("Turkish", "Türkçe", 7.22),
    "uk": Language("Ukrainian", "Українська", 7.52),
    "vi": Language("Vietnamese", "Tiếng Việt", 4.5),
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


DEFAULT_WORD_LENGTH = _round_half_up(
    sum(language.word_length for language in LANGUAGES.values()) / len(LANGUAGES)
)


class SampleSizeError(ValueError):
    """A phrase has too few words or no sentence to score."""

    def __init__(self, words: int, sentences: int) -> None:
        self.words = words
        self.sentences = sentences
        word_count = f"{words} word{'' if words == 1 else 's'}"
        sentence_count = f"{sentences} sentence{'' if sentences == 1 else 's'}"
        super().__init__(f"Sample size is too small: {word_count}, {sentence_count}")


class ScoredItem(NamedTuple):
    phrase: str
    words: int
    long_words: int
    sentences: int
    lix: int
    ovix: float


class Readability:
    """LIX and OVIX scores for one or more phrases.

    Args:
        text: A phrase, a list of phrases, or a mapping with ``text``,
            ``size`` and ``lang`` keys.
        size: Length a word must exceed to count as long. A language tag
            passed here is treated as ``lang``.
        lang: Language tag such as ``"sv"`` or ``"en-gb"``. A supported
            language sets the long-word length and takes precedence over
            ``size``.

    Phrases too small to score (fewer than five words or no sentence) score 0
    and set :attr:`error` to a :class:`SampleSizeError`; nothing is raised.
    """

    def __init__(self, text: Any = None, size: Any = None, lang: str | None = None) -> None:
        self._wlong = DEFAULT_WORD_LENGTH
        self._lang: str | None = None
        self.error: SampleSizeError | None = None
        self.parsed: list[ScoredItem] = []

        config = text if isinstance(text, Mapping) else {}
        if isinstance(size, str) and _LANGTAG.match(size):
            size, lang = None, size
        if config:
            text = config.get("text")
            size = config.get("size") or size
            lang = config.get("lang") or lang

        self.wlong = size or DEFAULT_WORD_LENGTH
        self.lang = lang
        self.content = text

    @property
    def wlong(self) -> int:
        """Length, in characters, a word must exceed to count as a long word."""
        return self._wlong

    @wlong.setter
    def wlong(self, value: Any) -> None:
        if not value or isinstance(value, bool):
            return
        if isinstance(value, (int, float)):
            self._wlong = int(value)
            return
        match = _LEADING_INT.match(str(value))
        if match is None:
            logger.debug("Ignoring non-numeric long word length %r", value)
            return
        self._wlong = int(match.group(1))

    @property
    def lang(self) -> str | None:
        return self._lang

    @lang.setter
    def lang(self, value: str | None) -> None:
        match = _LANGTAG.match(value or "")
        code = match.group(1).lower() if match else None
        if code not in LANGUAGES:
            if value:
                logger.debug("Unsupported language %r, keeping word length %d", value, self._wlong)
            return
        self._lang = code
        self.wlong = _round_half_up(LANGUAGES[code].word_length)

    @property
    def languages(self) -> list[dict[str, str]]:
        """The ``code`` and ``name`` of every supported language, sorted by code."""
        return [{"code": code, "name": LANGUAGES[code].name} for code in sorted(LANGUAGES)]

    @property
    def content(self) -> list[str]:
        return [item.phrase for item in self.parsed]

    @content.setter
    def content(self, value: Any) -> None:
        self.error = None
        if value is None:
            phrases = []
        elif isinstance(value, (list, tuple)):
            phrases = [str(phrase) for phrase in value]
        else:
            phrases = [str(value)]
        self.parsed = [self._parse(phrase) for phrase in phrases]

    def _parse(self, phrase: str) -> ScoredItem:
        bites = phrase.split(" ")
        words = len(bites)
        long_words = sum(1 for word in bites if len(word) > self._wlong)
        sentences = len([part for part in _SENTENCE_BREAK.split(phrase) if part])
        unique = len(set(bites))

        if words < MIN_WORDS or not sentences:
            self.error = SampleSizeError(words, sentences)
            logger.debug("%s: %r", self.error, phrase)
            return ScoredItem(phrase, words, long_words, sentences, 0, 0.0)

        lix = _round_half_up(words / sentences + long_words * 100 / words)
        denominator = math.log(2 - math.log(unique) / math.log(words))
        ovix = round(math.log(words) / denominator, 2) if denominator else 0.0
        return ScoredItem(phrase, words, long_words, sentences, lix, ovix)

    def score(self, content: Any = None) -> "Readability":
        """Re-score with new ``content`` when given. Returns self."""
        if content:
            self.content = content
        return self

    def item(self, index: int) -> ScoredItem:
        return self.parsed[index]

    @property
    def LIX(self) -> int:  # noqa: N802
        """Average LIX over all parsed phrases, 0 when there are none."""
        if not self.parsed:
            return 0
        return _round_half_up(sum(item.lix for item in self.parsed) / len(self.parsed))

    @property
    def OVIX(self) -> int:  # noqa: N802
        """Average OVIX over all parsed phrases, 0 when there are none."""
        if not self.parsed:
            return 0
        return _round_half_up(sum(item.ovix for item in self.parsed) / len(self.parsed))

    def __repr__(self) -> str:
        return f"Readability(lang={self._lang!r}, wlong={self._wlong}, LIX={self.LIX})"
