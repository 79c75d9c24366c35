"""
Fuzzy matching of executables on disk to a logical application name.

Scoring per candidate, against the target display name:
- +100 when the candidate's normalized name contains the normalized target
- +10 for every target token that also appears among the candidate tokens
- +5 when the candidate's first token starts with the target's first token

The highest score wins (first candidate on ties) and is accepted only
at or above ACCEPT_THRESHOLD.
"""

import os
import re
from dataclasses import dataclass

ACCEPT_THRESHOLD = 10
SUBSTRING_SCORE = 100
TOKEN_SCORE = 10
PREFIX_SCORE = 5

_TOKEN_SPLIT = re.compile(r"[ .\-_+]+")


@dataclass(frozen=True)
class CandidateExecutable:
    path: str
    file_name_without_extension: str

    @classmethod
    def from_path(cls, path):
        path = str(path)
        stem, _ext = os.path.splitext(os.path.basename(path))
        return cls(path=path, file_name_without_extension=stem)


def normalize(text):
    return "".join(ch.lower() for ch in str(text or "") if ch.isalnum())


def tokens(text):
    return [t.lower() for t in _TOKEN_SPLIT.split(str(text or "")) if t]


def score(candidate_name, target_display_name):
    target_norm = normalize(target_display_name)
    target_tokens = tokens(target_display_name)
    name_norm = normalize(candidate_name)
    name_tokens = tokens(candidate_name)

    total = 0
    if target_norm and target_norm in name_norm:
        total += SUBSTRING_SCORE
    total += TOKEN_SCORE * sum(1 for t in target_tokens if t in name_tokens)
    if target_tokens and name_tokens and name_tokens[0].startswith(target_tokens[0]):
        total += PREFIX_SCORE
    return total


def _as_candidate(item):
    if isinstance(item, CandidateExecutable):
        return item
    return CandidateExecutable.from_path(item)


def best_match(candidates, target_display_name):
    """
    Return (path, score) of the best scoring candidate, or (None, best score)
    when nothing reaches ACCEPT_THRESHOLD. Accepts CandidateExecutable items
    or plain paths.
    """
    best_path = None
    best_score = None
    for item in candidates or ():
        cand = _as_candidate(item)
        s = score(cand.file_name_without_extension, target_display_name)
        # Strict comparison keeps the earliest candidate on ties.
        if best_score is None or s > best_score:
            best_score = s
            best_path = cand.path
    if best_score is None:
        return None, 0
    if best_score < ACCEPT_THRESHOLD:
        return None, best_score
    return best_path, best_score


def resolve(candidates, target_display_name):
    path, _score = best_match(candidates, target_display_name)
    return path
