from __future__ import annotations

from typing import List, Sequence, Tuple

from contract_extractor.models import NOT_MATCHED, ExtractionReport, Matched, MatchOutcome
from contract_extractor.rules.builtins import DEFAULT_RULES
from contract_extractor.rules.core import Rule


def extract_field(text: str, rule: Rule) -> MatchOutcome:
    """Leftmost match of the rule in text, captured group trimmed."""
    match = rule.compiled.search(text)
    if match is None:
        return NOT_MATCHED
    return Matched(text=match.group(1).strip())


def extract(text: str, rules: Sequence[Rule]) -> List[Tuple[str, MatchOutcome]]:
    """
    Evaluate every rule against text, in rule order.

    A non-match is reported as NotMatched and never stops the remaining rules.
    """
    return [(rule.label, extract_field(text, rule)) for rule in rules]


def extract_contract(text: str, rules: Sequence[Rule] = DEFAULT_RULES) -> ExtractionReport:
    return ExtractionReport(outcomes=tuple(extract(text, rules)))
