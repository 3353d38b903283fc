"""Context builder: turn a classification into a short grounding sentence.

An empty string means "no grounding data"; the caller answers without it.
"""

from typing import Callable, Dict

from football_agent.data.schemas import FootballDataset
from football_agent.router import Classification, Intent

# Standings always summarize this league, whatever the query mentions.
STANDINGS_LEAGUE = "La Liga"
STANDINGS_TOP_N = 3


def next_match_context(classification: Classification, data: FootballDataset) -> str:
    team = data.team(classification.team)
    if team is None:
        return ""
    nxt = team.next_match
    return (
        f"Next match: {team.name} vs {nxt.opponent} on {nxt.date} at {nxt.time} "
        f"at {nxt.venue}. Recent form: {team.recent_form}"
    )


def live_score_context(classification: Classification, data: FootballDataset) -> str:
    match = data.current_live_match()
    if match is None:
        return ""
    return (
        f"Live match: {match.home} {match.score} {match.away} ({match.minute}'). "
        f"Competition: {match.competition}"
    )


def standings_context(classification: Classification, data: FootballDataset) -> str:
    # sorted() is stable: equal points keep dataset order.
    ranked = sorted(data.teams_in_league(STANDINGS_LEAGUE), key=lambda t: t.points, reverse=True)
    top = ranked[:STANDINGS_TOP_N]
    if not top:
        return ""
    table = ", ".join(f"{i}. {t.name} ({t.points} pts)" for i, t in enumerate(top, 1))
    return f"{STANDINGS_LEAGUE} standings: {table}"


_BUILDERS: Dict[Intent, Callable[[Classification, FootballDataset], str]] = {
    Intent.NEXT_MATCH: next_match_context,
    Intent.LIVE_SCORE: live_score_context,
    Intent.STANDINGS: standings_context,
}


def build_context(classification: Classification, data: FootballDataset) -> str:
    builder = _BUILDERS.get(classification.intent)
    return builder(classification, data) if builder else ""
