from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, Optional, Sequence, Tuple

from config.field_rules import BOILERPLATE
from models.field_extraction_rule import FieldExtractionRule


_FLAGS = re.DOTALL | re.MULTILINE

_WILDCARD = ".*?"
# Anything that makes a piece variable-width or alternating
_NOT_A_PIECE = re.compile(r"(?<!\\)[|()\[\]{}*+?]")


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, _FLAGS)


@lru_cache(maxsize=None)
def _compile_boundary(pattern: str) -> re.Pattern:
    # Zero-width, so finditer reports every position the boundary can start at
    return re.compile(f"(?={pattern})", _FLAGS)


@lru_cache(maxsize=None)
def _pieces(pattern: str) -> Optional[Tuple[str, ...]]:
    """Split ``a.*?b.*?c`` into its fixed-width pieces.

    Returns None when the pattern is anything richer than fixed-width pieces
    joined by lazy wildcards; those go through the regex engine as written.
    """
    parts = tuple(pattern.split(_WILDCARD))
    if len(parts) < 2 or any(not p or _NOT_A_PIECE.search(p) for p in parts):
        return None
    return parts


def _chain_end(text: str, pieces: Tuple[str, ...]) -> Optional[int]:
    # Earliest occurrence of each piece in turn: the same span the backtracking
    # engine settles on for the leftmost match, without the blowup on failure.
    pos = 0
    for piece in pieces:
        m = _compile(piece).search(text, pos)
        if m is None:
            return None
        pos = m.end()
    return pos


def _last_piece_start(text: str, piece: str, pos: int, bound: int) -> Optional[int]:
    """Last offset >= pos where ``piece`` matches and ends by ``bound``."""
    compiled = _compile(piece)
    last = None
    for m in _compile_boundary(piece).finditer(text, pos):
        if m.start() > bound:
            break
        hit = compiled.match(text, m.start())
        if hit is not None and hit.end() <= bound:
            last = m.start()
    return last


def _last_chain_start(text: str, pieces: Tuple[str, ...], pos: int) -> Optional[int]:
    # Walk the pieces backwards, each as late as the one after it allows
    bound = len(text)
    start = None
    for piece in reversed(pieces):
        start = _last_piece_start(text, piece, pos, bound)
        if start is None:
            return None
        bound = start
    return start


def _start_end(text: str, pattern: str) -> Optional[int]:
    """End offset of the leftmost match of ``pattern``, or None."""
    pieces = _pieces(pattern)
    if pieces is not None:
        return _chain_end(text, pieces)
    m = _compile(pattern).search(text)
    return m.end() if m else None


def _last_boundary(text: str, pattern: str, pos: int) -> Optional[int]:
    """Return the last offset >= pos where ``pattern`` matches, or None."""
    if not pattern:
        return len(text)
    pieces = _pieces(pattern)
    if pieces is not None:
        return _last_chain_start(text, pieces, pos)
    last = None
    for m in _compile_boundary(pattern).finditer(text, pos):
        last = m.start()
    return last


def clean_answer(raw: str) -> str:
    """Drop document scaffolding and the ':' that usually follows a heading."""
    s = raw
    # Removing one string can splice the halves of another back together
    while any(boilerplate in s for boilerplate in BOILERPLATE):
        for boilerplate in BOILERPLATE:
            s = s.replace(boilerplate, "")
    s = s.strip()
    if s.startswith(":"):
        s = s[1:].strip()
    return s


def extract(document_text: str, start_pattern: str, end_pattern: str) -> str:
    """Return the answer between a question's marker and the next boundary.

    The start marker is the leftmost match of ``start_pattern``; the answer runs
    up to the last place ``end_pattern`` matches after it, the same span a
    greedy ``start(.*)end`` would capture. An empty ``end_pattern`` runs to the
    end of the document. Missing sections come back as "".
    """
    if not document_text:
        return ""
    start = _start_end(document_text, start_pattern)
    if start is None:
        return ""
    end = _last_boundary(document_text, end_pattern, start)
    if end is None:
        return ""
    return clean_answer(document_text[start:end])


def extract_first(document_text: str, candidates: Iterable[Tuple[str, str]]) -> str:
    """Try each (start, end) pair in order; the first non-empty answer wins."""
    if not document_text:
        return ""
    for start_pattern, end_pattern in candidates:
        value = extract(document_text, start_pattern, end_pattern)
        if value:
            return value
    return ""


def extract_field(document_text: str, rule: FieldExtractionRule) -> str:
    return extract_first(document_text, rule.candidates)


def extract_all(document_text: str, rules: Sequence[FieldExtractionRule]) -> Dict[str, str]:
    return {rule.name: extract_field(document_text, rule) for rule in rules}
