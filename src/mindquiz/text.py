"""Tokenization and string similarity used by the grader."""
import re

_PUNCTUATION = re.compile(r"[^\w\s]")


def tokenize(text) -> list[str]:
    """Lowercase, turn punctuation into spaces and split on whitespace."""
    if not text or not isinstance(text, str):
        return []
    return _PUNCTUATION.sub(" ", text.lower()).split()


def clean_blank_answer(text: str) -> str:
    return _PUNCTUATION.sub("", text).lower().strip()


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """Normalized edit similarity in [0, 1]. Two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein(a, b) / longest


def token_overlap_ratio(learner_tokens: list[str], reference_tokens: list[str]) -> float:
    """Share of distinct reference tokens that also appear in the learner's answer."""
    reference = set(reference_tokens)
    return len(set(learner_tokens) & reference) / max(len(reference), 1)
