"""Static football dataset: schemas and loader."""

from football_agent.data.loader import load_dataset
from football_agent.data.schemas import FootballDataset, LiveMatch, MatchStatus, TeamRecord

__all__ = ["FootballDataset", "LiveMatch", "MatchStatus", "TeamRecord", "load_dataset"]
