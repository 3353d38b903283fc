"""Query router for the Football Intelligence Agent.

Classifies a free-text question into one intent and, when present,
the team it mentions. Keyword/regex only: routing costs no LLM call.

Priority (first match wins):
1. NEXT_MATCH  - future fixtures
2. LIVE_SCORE  - current match state
3. STANDINGS   - league ranking
Otherwise NONE (the team, if any, is still reported).
"""

import re
from enum import Enum
from re import Pattern
from typing import Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict


class Intent(str, Enum):
    NEXT_MATCH = "next_match"
    LIVE_SCORE = "live_score"
    STANDINGS = "standings"
    NONE = "none"


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Intent = Intent.NONE
    team: Optional[str] = None


# Declaration order is the priority order.
INTENT_PATTERNS: List[Tuple[Intent, List[Pattern[str]]]] = [
    (
        Intent.NEXT_MATCH,
        [re.compile(p) for p in (r"when.*play", r"next match", r"next game", r"upcoming")],
    ),
    (
        Intent.LIVE_SCORE,
        [re.compile(p) for p in (r"score", r"result", r"how.*doing", r"winning")],
    ),
    (
        Intent.STANDINGS,
        [
            re.compile(p)
            for p in (
                r"table",
                r"standings",
                r"position",
                r"league leader",
                r"points",
                r"leading",
                r"top of the",
            )
        ],
    ),
]

KNOWN_TEAM_NAMES: Tuple[str, ...] = (
    "real madrid",
    "barcelona",
    "manchester city",
    "liverpool",
    "arsenal",
    "chelsea",
)


def team_id_for(name: str) -> str:
    """Canonical team identifier: 'Real Madrid' -> 'real_madrid'."""
    return name.strip().lower().replace(" ", "_")


def compile_team_pattern(team_names: Iterable[str]) -> Pattern[str]:
    # Longer names first so that, at the same position, the longest name wins.
    names = sorted({n.strip().lower() for n in team_names if n.strip()}, key=len, reverse=True)
    if not names:
        return re.compile(r"(?!)")  # matches nothing
    return re.compile("|".join(re.escape(n) for n in names))


_DEFAULT_TEAM_PATTERN = compile_team_pattern(KNOWN_TEAM_NAMES)


def extract_team(query: str, team_pattern: Pattern[str] = _DEFAULT_TEAM_PATTERN) -> Optional[str]:
    """Return the canonical id of the leftmost known team in the query."""
    match = team_pattern.search(query.lower())
    return team_id_for(match.group(0)) if match and match.group(0) else None


def classify_intent(
    query: str,
    team_names: Optional[Sequence[str]] = None,
    intent_patterns: Sequence[Tuple[Intent, Sequence[Pattern[str]]]] = INTENT_PATTERNS,
) -> Classification:
    """Classify user intent from query.

    Args:
        query: User's natural language query (matched case-insensitively)
        team_names: Known team display names; None means KNOWN_TEAM_NAMES,
            an empty list disables team extraction
        intent_patterns: Ordered (intent, patterns) pairs; earlier entries win

    Returns:
        Classification with `intent` and optional canonical `team` id
    """
    q = query.lower()
    team_pattern = (
        _DEFAULT_TEAM_PATTERN if team_names is None else compile_team_pattern(team_names)
    )
    team = extract_team(q, team_pattern)

    for intent, patterns in intent_patterns:
        if any(pattern.search(q) for pattern in patterns):
            return Classification(intent=intent, team=team)

    return Classification(intent=Intent.NONE, team=team)
