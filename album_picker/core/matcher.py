# album_picker/core/matcher.py
import logging
from typing import NamedTuple, Sequence

from fuzzywuzzy import fuzz

from album_picker.core.candidates import NamedEntry

DEBUG_RANK_LIMIT = 5


class EmptyCandidateSetError(ValueError):
    """Raised when a selection is requested from zero candidates."""


class ScoredMatch(NamedTuple):
    score: int
    candidate: NamedEntry


def score_name(name: str, query: str) -> int:
    """Closeness of a candidate name to a free-text query, 0-100. Case-insensitive."""
    return fuzz.WRatio(name.upper(), query.upper())


def rank_candidates(candidates: Sequence[NamedEntry], query: str) -> list[ScoredMatch]:
    """All candidates scored against the query, best first; equal scores keep input order."""
    scored = [ScoredMatch(score_name(c.name, query), c) for c in candidates]
    return sorted(scored, key=lambda m: m.score, reverse=True)


def resolve_query(candidates: Sequence[NamedEntry], query: str) -> NamedEntry:
    """
    Returns the candidate whose name best matches the query.

    Among candidates sharing the top score, the one earliest in input order wins.
    """
    if not candidates:
        raise EmptyCandidateSetError("Cannot resolve a query against an empty candidate set.")

    ranked = rank_candidates(candidates, query)
    logging.debug(f"MATCHER: Top matches for '{query}': "
                  + ", ".join(f"'{m.candidate.name}' ({m.score})" for m in ranked[:DEBUG_RANK_LIMIT]))
    best = ranked[0]
    tied = sum(1 for m in ranked if m.score == best.score)
    if tied > 1:
        logging.debug(f"MATCHER: {tied} candidates tied at {best.score} for '{query}'; taking the first listed.")
    logging.info(f"MATCHER: Query '{query}' -> '{best.candidate.name}' (Score: {best.score}, {len(candidates)} candidates)")
    return best.candidate
