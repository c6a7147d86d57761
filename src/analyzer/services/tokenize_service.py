# src/analyzer/services/tokenize_service.py
import logging
import re

from analyzer.model import TokenStream

logger = logging.getLogger(__name__)

# Every run of '.', '!' or '?' closes exactly one sentence: the text since the
# previous run, up to and including this one. '...' and '?!' count once and
# trailing text without a terminator is not a sentence.
SENTENCE_END_PATTERN = re.compile(r"[.!?]+")

# Words are maximal runs of [A-Za-z0-9_]. re.ASCII keeps accented letters
# out of the class, so 'café' yields the word 'caf'.
WORD_PATTERN = re.compile(r"\w+", re.ASCII)

# A paragraph break is a newline, an optionally blank (whitespace-only) line
# body, and another newline.
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")


def split_sentences(text: str) -> tuple[str, ...]:
    sentences = []
    start = 0
    for match in SENTENCE_END_PATTERN.finditer(text):
        sentences.append(text[start:match.end()].strip())
        start = match.end()
    return tuple(sentences)


def split_words(text: str) -> tuple[str, ...]:
    return tuple(WORD_PATTERN.findall(text))


def split_paragraphs(text: str) -> tuple[str, ...]:
    """Splits on blank lines and drops blocks that are only whitespace."""
    blocks = PARAGRAPH_BREAK_PATTERN.split(text)
    return tuple(block.strip() for block in blocks if block.strip())


def tokenize(text: str) -> TokenStream:
    """
    Splits a document into sentences, words and paragraphs.

    The three sequences are derived independently from the same input.
    Empty or whitespace-only text gives three empty sequences.
    """
    stream = TokenStream(
        sentences=split_sentences(text),
        words=split_words(text),
        paragraphs=split_paragraphs(text),
    )
    logger.debug(
        "Tokenized %d chars: %d sentences, %d words, %d paragraphs.",
        len(text), len(stream.sentences), len(stream.words), len(stream.paragraphs)
    )
    return stream
