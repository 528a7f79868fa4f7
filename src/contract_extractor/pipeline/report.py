from __future__ import annotations

from typing import List

from contract_extractor.models import ExtractionReport

FAILURE_HEADER = "Uno o más errores fueron encontrados. Fallaron los patrones de: "
FAILURE_FOOTER = "Favor corregirlo en el documento y vuelva a pegarlo."


def render_report(report: ExtractionReport) -> List[str]:
    # Matches first, then a single failure block listing every missing field.
    lines = [f"{label}: {text}" for label, text in report.matched]

    if not report.ok:
        lines.append(FAILURE_HEADER)
        lines.extend(report.failed_labels)
        lines.append(FAILURE_FOOTER)

    return lines
