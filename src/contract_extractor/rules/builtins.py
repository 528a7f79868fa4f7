from __future__ import annotations

from typing import Tuple

from contract_extractor.rules.core import Rule

# Display order of the extracted fields.
DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule("Entidad", r"De una parte,\s*(.*?),"),
    Rule("RNC", r"\bRNC\s(\d{9})\b"),
    Rule("Representante", r"Ministro,\s*(.*?),"),
    Rule(
        "Cédula del Representante",
        r"\bCédula de Identidad y Electoral No\.\s(\d{3}-\d{7}-\d{1})\b",
    ),
    Rule("Otra Parte", r"a otra parte,\s*(.*?),"),
    # Lowercase variant; matching is case-sensitive so it does not pick up
    # the representative's ID above.
    Rule(
        "Cédula de la Otra Parte",
        r"\bcédula de identidad y electoral No\.\s(\d{3}-\d{7}-\d{1})\b",
    ),
)
