# src/contract_extractor/app/menu.py
from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence

from contract_extractor.config.settings import Settings, load_settings
from contract_extractor.extractors.fields import extract_contract
from contract_extractor.pipeline.report import render_report
from contract_extractor.rules.builtins import DEFAULT_RULES
from contract_extractor.rules.core import Rule

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

EXTRACT = 1
EXIT = 2

MENU_LINES = (
    "***** Extraer Patrones de Texto *****",
    "1. Extraer",
    "2. Salir",
    "",
)
CHOICE_PROMPT = "Opción proporcionada: "
INVALID_OPTION = "Opción no válida. Por favor, seleccione una opción válida."
PASTE_PROMPT = "Favor pegar el texto del contrato:"
BLANK_LINE_HINT = (
    "(Termine con una línea en blanco. Si el contrato tiene párrafos separados "
    "por líneas en blanco, defina CONTRACT_EXTRACTOR_END_MARKER.)"
)
MARKER_HINT = "(Termine con una línea que diga: {marker})"


def paste_hint(settings: Settings) -> Optional[str]:
    """How a multi-line paste ends; nothing to say in single-line mode."""
    if settings.single_line:
        return None
    if settings.end_marker:
        return MARKER_HINT.format(marker=settings.end_marker)
    return BLANK_LINE_HINT


class InvalidMenuOption(ValueError):
    """Raised for menu input that is not one of the listed options."""


def parse_choice(raw: str) -> int:
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidMenuOption(raw) from None
    if choice not in (EXTRACT, EXIT):
        raise InvalidMenuOption(raw)
    return choice


def read_contract_text(read_line: ReadLine, settings: Settings) -> str:
    """
    Read the pasted contract.
    Multi-line pastes end at the end marker line or at EOF.
    """
    if settings.single_line:
        try:
            return read_line("")
        except EOFError:
            return ""

    lines: List[str] = []
    while True:
        try:
            line = read_line("")
        except EOFError:
            break
        if line.strip() == settings.end_marker:
            # A blank marker must not end the paste before anything arrived.
            if not settings.end_marker and not lines:
                continue
            break
        lines.append(line)
    return "\n".join(lines)


def run_menu(
    *,
    read_line: ReadLine = input,
    write: Write = print,
    settings: Optional[Settings] = None,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> None:
    """
    Interactive loop: show the menu, extract on 1, leave on 2 or EOF.

    Args:
        read_line: input()-like callable; raises EOFError when input ends.
        write: print()-like callable receiving one line at a time.
        settings: Input/diagnostic settings, loaded from ENV when omitted.
        rules: Rules applied to every pasted contract.
    """
    settings = settings or load_settings()

    def log(msg: str) -> None:
        if settings.verbose:
            write(msg)

    while True:
        write("")
        for line in MENU_LINES:
            write(line)

        try:
            raw = read_line(CHOICE_PROMPT)
        except EOFError:
            log("[menu] End of input, leaving")
            return

        try:
            choice = parse_choice(raw)
        except InvalidMenuOption:
            log(f"[menu] Rejected option {raw!r}")
            write(INVALID_OPTION)
            continue

        if choice == EXIT:
            log("[menu] Exit selected")
            return

        write("")
        write(PASTE_PROMPT)
        hint = paste_hint(settings)
        if hint:
            write(hint)
        text = read_contract_text(read_line, settings)
        log(f"[extract] Read {len(text)} characters")

        report = extract_contract(text, rules)
        for line in render_report(report):
            write(line)
        log(f"[extract] {len(report.outcomes)} rules evaluated, {len(report.failed_labels)} failed")


def _configure_utf8_console() -> None:
    # Contract text and labels carry accented characters. Pastes from
    # cp1252/latin-1 sources must not abort the loop, so stdin replaces
    # undecodable bytes; stdout stays strict.
    for stream, errors in ((sys.stdin, "replace"), (sys.stdout, "strict")):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8", errors=errors)


def main() -> int:
    _configure_utf8_console()
    try:
        run_menu(settings=load_settings())
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
