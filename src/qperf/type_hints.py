"""Type hints used in QPerf."""

from typing import Dict, List, Tuple

# Set id -> ordered category letters for that question set
QuestionTypeMap = Dict[str, List[str]]
# Raw quiz log row, one string per column
Columns = List[str]
# (quizzer name, team name)
QuizzerTeam = Tuple[str, str]
# Unordered team pair, stored in canonical (sorted) order
MatchupKey = Tuple[str, str]
