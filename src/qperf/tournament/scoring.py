"""Team scoring and quizzer statistics for confirmed rounds.

Team scoring rules, applied per event in log order:

1. A correct answer is worth 20 points.
2. A correct bonus (a question thrown out to the other team) is worth 10.
3. When a third or fourth quizzer of a team gets a first correct answer
   in the round, the team gets 10 more.
4. A quizzer answering 4 correct without an error (a quiz-out) earns the
   team 10 more.
5. A quizzer's 3rd error costs the team 10 points.
6. Every error on question 16 or later costs the team 10 points.
"""

# QPerf
# Copyright (C) 2025  QPerf developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import repeat
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from qperf.constants import (
    BONUS_POINTS,
    CORRECT_POINTS,
    ERROR_DEDUCTION,
    ERROR_OUT_INCORRECT,
    LATE_ERROR_QUESTION,
    QUIZ_OUT_BONUS,
    QUIZ_OUT_CORRECT,
    THIRD_QUIZZER_BONUS,
    THIRD_QUIZZER_COUNT,
    UNRESOLVED_QUESTION_TYPE,
)
from qperf.models.accumulator import Accumulator
from qperf.models.event import EventCode, EventRecord
from qperf.models.round import ConfirmedRound, TeamRoundResult
from qperf.models.stats import QuizzerStats
from qperf.tournament.question_types import QuestionTypeResolver
from qperf.type_hints import QuestionTypeMap
from qperf.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ActiveQuizzer:
    """Answers (not bonuses) a quizzer has given in the current round."""

    correct: int = 0
    incorrect: int = 0


@dataclass
class TeamTally:
    """Running score and active quizzer ledger of one team in one round."""

    name: str
    score: int = 0
    ledger: Dict[str, ActiveQuizzer] = field(default_factory=dict)

    def scoring_quizzers(self) -> int:
        """Number of quizzers with at least one correct answer this round."""
        return sum(1 for quizzer in self.ledger.values() if quizzer.correct > 0)


@dataclass
class _RoundContext:
    round: ConfirmedRound
    teams: List[TeamTally]
    accumulator: Accumulator


class ScoringEngine:
    """Replays a round's events to produce team scores and quizzer stats.

    This class is responsible for:
    - Resolving the question type of every event
    - Updating quizzer counters in the shared stat table
    - Keeping each team's active quizzer ledger for the round
    - Applying the team bonus and deduction rules
    """

    def __init__(self, resolver: QuestionTypeResolver):
        self.resolver = resolver
        self._handlers: Dict[
            EventCode, Callable[[EventRecord, str, _RoundContext], None]
        ] = {
            EventCode.CORRECT_ANSWER: self._correct_answer,
            EventCode.INCORRECT_ANSWER: self._incorrect_answer,
            EventCode.BONUS_CORRECT: self._bonus_correct,
            EventCode.BONUS_INCORRECT: self._bonus_incorrect,
            EventCode.TEAM_NAME: self._team_name,
            EventCode.QUIZZER_NAME: self._ignore,
            EventCode.ROOM_MARKER: self._ignore,
        }

    def score_round(
        self, confirmed_round: ConfirmedRound, accumulator: Accumulator
    ) -> List[TeamRoundResult]:
        """Score one round.

        Results cover the confirmed roster only. A slot synthesized during
        the replay is scored but dropped here, so it never reaches the
        standings. A slot renamed mid-round keeps its roster name.

        Args:
            confirmed_round: The round to score. Its ``results`` are replaced.
            accumulator: Stat table and warnings sink

        Returns:
            Final score of every roster slot, in slot order
        """
        tallies = self.replay(confirmed_round, accumulator)
        confirmed_round.results = [
            TeamRoundResult(
                round_key=confirmed_round.key, team_name=name, score=tally.score
            )
            for name, tally in zip(confirmed_round.team_names, tallies)
        ]
        return confirmed_round.results

    def replay(
        self, confirmed_round: ConfirmedRound, accumulator: Accumulator
    ) -> List[TeamTally]:
        """Apply every event of a round and return the team tallies.

        The tallies start from the roster and may grow when an event names a
        slot beyond it.
        """
        logger.debug(f"Starting next round: {confirmed_round.key}")
        context = _RoundContext(
            round=confirmed_round,
            teams=[TeamTally(name=name) for name in confirmed_round.team_names],
            accumulator=accumulator,
        )

        for event in confirmed_round.events:
            question_type = self._question_type(event, accumulator)
            self._handlers[event.code](event, question_type, context)
            logger.debug(
                f"Room: {confirmed_round.room} Round: {confirmed_round.round_id} "
                f"Question: {event.question_number} "
                f"Teams: {[t.name for t in context.teams]} "
                f"Scores: {[t.score for t in context.teams]}"
            )
        return context.teams

    def _question_type(self, event: EventRecord, accumulator: Accumulator) -> str:
        question_type = self.resolver.resolve(event.round_id, event.question_index)
        if question_type == UNRESOLVED_QUESTION_TYPE:
            accumulator.note_missing_question_set(event.round_id)
        return question_type

    def _stats(self, event: EventRecord, context: _RoundContext) -> QuizzerStats:
        team = ""
        if event.team_number < len(context.teams):
            team = context.teams[event.team_number].name
        return context.accumulator.stats.get_or_create(event.name, team)

    def _team(self, event: EventRecord, context: _RoundContext) -> Optional[TeamTally]:
        """Team tally for the event's slot.

        A slot beyond the roster is created, named after the quizzer, and
        None is returned so the triggering event does not score.
        """
        teams = context.teams
        if event.team_number < len(teams):
            return teams[event.team_number]

        while len(teams) <= event.team_number:
            teams.append(TeamTally(name=""))
        teams[event.team_number] = TeamTally(name=event.name)
        context.accumulator.warn(
            f"Warning: Team number {event.team_number} added mid-round in room "
            f"{context.round.room} round {context.round.round_id}. "
            "This should not happen."
        )
        return None

    def _trace(self, event: EventRecord, context: _RoundContext, message: str) -> None:
        logger.debug(
            f"[Team Scoring] Rm: {context.round.room} Rd: {context.round.round_id} "
            f"Q: {event.question_number} {message}"
        )

    def _correct_answer(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        self._stats(event, context).record_answer(question_type, correct=True)

        team = self._team(event, context)
        if team is None:
            return

        team.score += CORRECT_POINTS
        self._trace(
            event,
            context,
            f"Quizzer {event.name} got a question right. "
            f"Added {CORRECT_POINTS} points to team {team.name}.",
        )

        quizzer = team.ledger.setdefault(event.name, ActiveQuizzer())
        quizzer.correct += 1
        if quizzer.correct == QUIZ_OUT_CORRECT and quizzer.incorrect == 0:
            team.score += QUIZ_OUT_BONUS
            self._trace(event, context, f"Quiz-out bonus applied to team {team.name}.")

        if team.scoring_quizzers() >= THIRD_QUIZZER_COUNT and quizzer.correct == 1:
            team.score += THIRD_QUIZZER_BONUS
            self._trace(
                event, context, f"3rd/4th person bonus applied to team {team.name}."
            )

    def _incorrect_answer(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        self._stats(event, context).record_answer(question_type, correct=False)

        team = self._team(event, context)
        if team is None:
            return

        quizzer = team.ledger.setdefault(event.name, ActiveQuizzer())
        quizzer.incorrect += 1
        if (
            event.question_number >= LATE_ERROR_QUESTION
            or quizzer.incorrect == ERROR_OUT_INCORRECT
        ):
            team.score -= ERROR_DEDUCTION
            self._trace(
                event,
                context,
                f"Quizzer {event.name} got a question wrong. "
                f"Deducted {ERROR_DEDUCTION} points from team {team.name}.",
            )
        else:
            self._trace(
                event,
                context,
                f"Quizzer {event.name} got a question wrong. No penalty applied.",
            )

    def _bonus_correct(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        self._stats(event, context).record_bonus(question_type, correct=True)

        team = self._team(event, context)
        if team is not None:
            team.score += BONUS_POINTS
            self._trace(
                event,
                context,
                f"Quizzer {event.name} got a bonus right. "
                f"Added {BONUS_POINTS} points to team {team.name}.",
            )

        # The quizzer is only added when no team at all has them ledgered.
        if not any(event.name in tally.ledger for tally in context.teams):
            context.teams[event.team_number].ledger[event.name] = ActiveQuizzer()

    def _bonus_incorrect(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        self._stats(event, context).record_bonus(question_type, correct=False)

    def _team_name(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        """A team named mid-round starts over with an empty score and ledger."""
        teams = context.teams
        while len(teams) <= event.team_number:
            teams.append(TeamTally(name=""))
        teams[event.team_number] = TeamTally(name=event.name)

    def _ignore(
        self, event: EventRecord, question_type: str, context: _RoundContext
    ) -> None:
        pass


def _score_round_task(
    confirmed_round: ConfirmedRound, question_types: QuestionTypeMap
) -> Tuple[List[TeamRoundResult], Accumulator]:
    """Worker entry point: score a copy of one round into a fresh accumulator."""
    partial = Accumulator()
    engine = ScoringEngine(QuestionTypeResolver(question_types))
    return engine.score_round(confirmed_round, partial), partial


def score_rounds(
    rounds: Iterable[ConfirmedRound],
    resolver: QuestionTypeResolver,
    accumulator: Accumulator,
    workers: int = 1,
) -> List[ConfirmedRound]:
    """Score every round, optionally across several processes.

    Rounds are independent, so with ``workers > 1`` each one is scored in a
    worker against its own partial accumulator. Partials are merged back
    in round order, which keeps the result identical to a sequential run.

    Returns:
        The rounds, each with ``results`` filled in
    """
    rounds = list(rounds)
    if workers <= 1 or len(rounds) < 2:
        engine = ScoringEngine(resolver)
        for confirmed_round in rounds:
            engine.score_round(confirmed_round, accumulator)
        return rounds

    logger.info(f"Scoring {len(rounds)} rounds with {workers} workers")
    with ProcessPoolExecutor(max_workers=workers) as executor:
        outcomes = list(
            executor.map(
                _score_round_task, rounds, repeat(resolver.question_types)
            )
        )
    for confirmed_round, (results, partial) in zip(rounds, outcomes):
        confirmed_round.results = results
        accumulator.merge(partial)
    return rounds


def warn_missing_question_sets(
    accumulator: Accumulator, resolver: QuestionTypeResolver
) -> None:
    """Summarize rounds that were scored without a question set."""
    if not accumulator.missing_question_sets:
        return
    logger.info(f"Found question sets: {resolver.known_rounds()}")
    accumulator.warn(
        "Warning: Some rounds are missing question sets! "
        "Their questions are counted under question type A!"
    )
    accumulator.warn(f"Skipped Rounds: {accumulator.missing_question_sets}")
    accumulator.warn(
        "Round names must match between the quiz data and the question set files!"
    )
