"""
Data contract for the football facts used to ground answers.
Records are frozen: loaded once at startup and shared read-only by every request.
"""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

KNOWN_LEAGUES = ("La Liga", "Premier League")


class NextMatch(BaseModel):
    """Upcoming fixture. All fields are display strings."""
    model_config = ConfigDict(frozen=True)

    opponent: str
    date: str
    time: str
    venue: str


class TopScorer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    goals: int = Field(..., ge=0)


class TeamRecord(BaseModel):
    """One team's standing and fixture data."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Canonical team identifier, e.g. real_madrid")
    name: str
    league: str
    position: int = Field(..., ge=1)
    points: int = Field(..., ge=0)
    recent_form: str = Field(..., pattern=r"^[WDL]{5}$", description="Last five results, newest last")
    next_match: NextMatch
    top_scorer: TopScorer

    @field_validator("league")
    @classmethod
    def validate_league(cls, v: str) -> str:
        if v not in KNOWN_LEAGUES:
            raise ValueError(f"Unknown league '{v}'. Expected one of {KNOWN_LEAGUES}")
        return v


class MatchStatus(str, Enum):
    LIVE = "LIVE"
    HALF_TIME = "HALF_TIME"
    FINISHED = "FINISHED"
    SCHEDULED = "SCHEDULED"


class MatchEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    minute: int = Field(..., ge=0)
    type: str
    player: str
    team: str


class LiveMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_id: str
    competition: str
    home: str
    away: str
    score: str = Field(..., description="Display score, e.g. '2-1'")
    minute: int = Field(..., ge=0)
    status: MatchStatus
    events: Tuple[MatchEvent, ...] = ()


class FootballDataset(BaseModel):
    """
    The whole fact table. Team order is the dataset order and is used
    as the tie-breaker when ranking by points.
    """
    model_config = ConfigDict(frozen=True)

    teams: Tuple[TeamRecord, ...] = ()
    live_matches: Tuple[LiveMatch, ...] = ()

    @field_validator("teams")
    @classmethod
    def validate_unique_ids(cls, v: Tuple[TeamRecord, ...]) -> Tuple[TeamRecord, ...]:
        seen = set()
        for team in v:
            if team.id in seen:
                raise ValueError(f"Duplicate team id '{team.id}'")
            seen.add(team.id)
        return v

    def team(self, team_id: Optional[str]) -> Optional[TeamRecord]:
        if not team_id:
            return None
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def teams_in_league(self, league: str) -> List[TeamRecord]:
        return [team for team in self.teams if team.league == league]

    def current_live_match(self) -> Optional[LiveMatch]:
        for match in self.live_matches:
            if match.status is MatchStatus.LIVE:
                return match
        return None
