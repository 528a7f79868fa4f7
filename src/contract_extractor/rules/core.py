from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rule:
    """
    A labeled regex with exactly one capturing group.

    The pattern is compiled once with DOTALL so lazy captures may run across
    line breaks in pasted contract text, and with ASCII so \\d and \\s only
    accept ASCII digits and whitespace.
    """
    label: str
    pattern: str
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, flags=re.DOTALL | re.ASCII)
        except re.error as exc:
            raise ValueError(f"Invalid pattern for rule {self.label!r}: {exc}") from exc

        if compiled.groups != 1:
            raise ValueError(
                f"Rule {self.label!r} must have exactly one capturing group, "
                f"got {compiled.groups}"
            )
        # Frozen dataclass: bypass __setattr__ for the derived field.
        object.__setattr__(self, "compiled", compiled)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self.label!r}, pattern={self.pattern!r})"
