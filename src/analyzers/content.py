"""Content and readability extractor."""

import math
import re
from collections import Counter

from core.document import Document
from core.models import ContentFeatures, FetchOutcome

VOWELS = "aeiouy"
SENTENCE_SPLIT = re.compile(r"[.!?]+")
NON_WORD = re.compile(r"[^\w]")

# Tokens must be longer than this to count as words
MIN_WORD_LENGTH = 2
# Tokens must be longer than this to count as keywords
MIN_KEYWORD_LENGTH = 3
TOP_KEYWORDS = 10


def extract_content(document: Document, outcome: FetchOutcome) -> ContentFeatures:
    """
    Extract on-page text signals.

    Word, sentence and readability metrics are computed on body text with
    script, style, nav, footer and aside content removed.
    """
    text = document.content_text()
    words = [word for word in text.split() if len(word) > MIN_WORD_LENGTH]
    word_count = len(words)
    sentences = len([s for s in SENTENCE_SPLIT.split(text) if s.strip()])

    if word_count == 0:
        avg_words = 0.0
        avg_syllables = 0.0
        readability = 0
    else:
        avg_words = word_count / sentences if sentences else 0.0
        avg_syllables = average_syllables(words)
        readability = flesch_reading_ease(avg_words, avg_syllables)

    return ContentFeatures(
        title=document.text(document.select_first("title")),
        meta_description=(
            document.attr(
                document.select_first("meta", {"name": "description"}), "content", ""
            ).strip()
        ),
        h1_tags=_headings(document, "h1"),
        h2_tags=_headings(document, "h2"),
        h3_tags=_headings(document, "h3"),
        word_count=word_count,
        sentences=sentences,
        paragraphs=document.count("p"),
        avg_words_per_sentence=round(avg_words, 1),
        avg_syllables_per_word=round(avg_syllables, 2),
        readability_score=readability,
        keyword_density=keyword_density(words),
    )


def _headings(document: Document, tag: str) -> list[str]:
    texts = (document.text(heading) for heading in document.select_all(tag))
    return [text for text in texts if text]


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting transitions into a vowel group.

    A trailing silent "e" removes one; every word has at least one.
    """
    word = word.lower()
    syllables = 0
    previous_was_vowel = False

    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            syllables += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        syllables -= 1

    return max(1, syllables)


def average_syllables(words: list[str]) -> float:
    if not words:
        return 0.0
    return sum(count_syllables(word) for word in words) / len(words)


def flesch_reading_ease(avg_words_per_sentence: float, avg_syllables: float) -> int:
    """Flesch Reading Ease, clamped to 0-100 and rounded."""
    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables
    return math.floor(max(0.0, min(100.0, score)) + 0.5)


def keyword_density(words: list[str]) -> dict[str, float]:
    """
    Top keywords and their share of all words, as a percentage.

    Keywords are lower-cased with punctuation stripped and must be longer
    than three characters. Ties keep first-seen order.
    """
    total = len(words)
    if total == 0:
        return {}

    frequencies = Counter()
    for word in words:
        clean = NON_WORD.sub("", word.lower())
        if len(clean) > MIN_KEYWORD_LENGTH:
            frequencies[clean] += 1

    return {
        word: round(count / total * 100, 1)
        for word, count in frequencies.most_common(TOP_KEYWORDS)
    }
