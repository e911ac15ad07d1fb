"""Round reconstruction from the flat quiz log.

The quiz log is one long stream of events. This module groups it into
rounds keyed by (room, round), builds each round's roster from the team
and quizzer name events, and keeps only rounds in which a question was
actually played.
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

from typing import Dict, Iterable, List, Optional, Tuple

from qperf.models.accumulator import Accumulator
from qperf.models.event import EventCode, EventRecord
from qperf.models.round import ConfirmedRound, Roster, round_key
from qperf.utils import setup_logger

logger = setup_logger(__name__)


class RoundReconstructor:
    """Groups ordered event records into confirmed rounds.

    The logging tool sometimes leaves team and quizzer names behind from
    practice sessions. Those names never come with a scored question, so a
    roster is only kept when at least one scoring event arrived while its
    (room, round) key was current.

    This class is responsible for:
    - Detecting round boundaries from changes of (room, round)
    - Building rosters from team name and quizzer name events
    - Buffering the scoring events of each round
    - Confirming or discarding each round at its boundary
    """

    def __init__(self, accumulator: Accumulator):
        self.accumulator = accumulator
        self.rounds: Dict[str, ConfirmedRound] = {}
        self._current_key: Optional[Tuple[str, str]] = None
        self._roster = Roster()
        self._events: List[EventRecord] = []
        self._action = False

    def reconstruct(self, records: Iterable[EventRecord]) -> Dict[str, ConfirmedRound]:
        """Process every record and return the confirmed rounds.

        Args:
            records: Event records in log order

        Returns:
            Round key -> confirmed round, in order of confirmation
        """
        for record in records:
            self.process(record)
        self.finish()
        logger.debug(f"Confirmed teams: {self.accumulator.confirmed_teams}")
        logger.debug(f"Confirmed quizzers: {self.accumulator.confirmed_quizzers}")
        return self.rounds

    def process(self, record: EventRecord) -> None:
        """Feed one record, closing the current round if the key changed."""
        if record.round_key != self._current_key:
            self._finalize_round()
            self._current_key = record.round_key

        if record.code is EventCode.TEAM_NAME:
            self._roster.declare_team(record.team_number, record.name)
            logger.debug(f"Set team number {record.team_number} to {record.name}")
        elif record.code is EventCode.QUIZZER_NAME:
            self._roster.declare_quizzer(
                record.team_number, record.seat_number, record.name
            )
            logger.debug(
                f"Set seat number {record.seat_number} to {record.name} "
                f"for team number {record.team_number}"
            )
        elif record.code.is_scoring:
            self._action = True
            self._events.append(record)
        # Room markers only matter for boundary detection.

    def finish(self) -> None:
        """Close the trailing round at the end of the stream."""
        logger.debug(f"Checking last round, {len(self._events)} records remaining")
        self._finalize_round()

    def _finalize_round(self) -> None:
        if self._current_key is not None:
            if self._action:
                self._confirm_round(*self._current_key)
            elif self._roster.slots:
                logger.debug(
                    f"No action taken in round {round_key(*self._current_key)}, "
                    f"teams {[s.name for s in self._roster.slots]} might be from practice"
                )
        self._action = False
        self._events = []
        self._roster.clear()

    def _confirm_round(self, room: str, round_id: str) -> None:
        teams = self._roster.pruned()
        self.accumulator.register_teams(teams)

        confirmed = ConfirmedRound(
            room=room, round_id=round_id, teams=teams, events=list(self._events)
        )
        key = confirmed.key
        if key in self.rounds:
            self.accumulator.warn(f"Warning: Duplicate round number: {key}, overwriting!")
            del self.rounds[key]
        self.rounds[key] = confirmed

        logger.debug(
            f"Confirming round {key} with teams {confirmed.team_names} "
            f"and {len(confirmed.events)} records"
        )


def reconstruct_rounds(
    records: Iterable[EventRecord], accumulator: Accumulator
) -> Dict[str, ConfirmedRound]:
    """Group records into confirmed rounds (see ``RoundReconstructor``)."""
    return RoundReconstructor(accumulator).reconstruct(records)
