"""Data models for QPerf."""

from qperf.models.accumulator import Accumulator
from qperf.models.config import AnalysisConfig
from qperf.models.event import EventCode, EventRecord
from qperf.models.round import (
    ConfirmedRound,
    Roster,
    TeamRoundResult,
    TeamSlot,
    round_key,
)
from qperf.models.standing import TournamentStanding
from qperf.models.stats import QuizzerStats, QuizzerStatTable, category_index

__all__ = [
    "Accumulator",
    "AnalysisConfig",
    "ConfirmedRound",
    "EventCode",
    "EventRecord",
    "QuizzerStatTable",
    "QuizzerStats",
    "Roster",
    "TeamRoundResult",
    "TeamSlot",
    "TournamentStanding",
    "category_index",
    "round_key",
]
