from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Matched:
    text: str


@dataclass(frozen=True)
class NotMatched:
    pass


NOT_MATCHED = NotMatched()

MatchOutcome = Union[Matched, NotMatched]


@dataclass(frozen=True)
class ExtractionReport:
    """Outcome of one extraction run, one entry per rule in rule order."""
    outcomes: Tuple[Tuple[str, MatchOutcome], ...]

    @property
    def matched(self) -> List[Tuple[str, str]]:
        return [
            (label, outcome.text)
            for label, outcome in self.outcomes
            if isinstance(outcome, Matched)
        ]

    @property
    def failed_labels(self) -> List[str]:
        return [label for label, outcome in self.outcomes if isinstance(outcome, NotMatched)]

    @property
    def ok(self) -> bool:
        return not self.failed_labels
