#!/usr/bin/env python3
"""
shuntcalc.py — CLI narzędzie ShuntCalc.

Działa całkowicie lokalnie — nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem SHUNT_CALC_
lub plik .env (np. SHUNT_CALC_REPL_PROMPT="calc> ").

Podkomendy:
    repl  — interaktywna pętla; kończy się na "exit" (lub EOF)
    eval  — oblicz kolejne wyrażenia w jednej instancji (zmienne przechodzą dalej)
    rpn   — pokaż sekwencję postfix i kroki obliczeń

Użycie:
    python shuntcalc.py repl
    python shuntcalc.py eval "x = 5" "x * 2"
    echo "2 ** 3 ** 2" | python shuntcalc.py eval
    python shuntcalc.py rpn "-(2 + 3) * sqrt(16)"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.postfix_evaluator import format_number
from calculator import Calculator
from config import Settings
from contracts import CalculatorError


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value).replace("→", "->").replace("—", "-")
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _format_error(exc: CalculatorError) -> str:
    return f"Error: {exc.message}"


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Step")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), _safe_terminal_text(step))
    _console().print(table)


# -- podkomendy ------------------------------------------------------------

def run_repl(
    calc: Calculator,
    settings: Settings,
    read_line: Callable[[str], str] = input,
) -> int:
    """
    Pętla read-eval-print. Zwraca liczbę obliczonych linii.
    Pusta linia jest pomijana; EOF działa jak komenda wyjścia.
    """
    evaluated = 0
    while True:
        try:
            line = read_line(settings.repl_prompt)
        except EOFError:
            print()
            break

        if line.strip() == settings.exit_command:
            break
        if not line.strip():
            continue

        evaluated += 1
        try:
            print(format_number(calc.evaluate(line)))
        except CalculatorError as exc:
            print(_format_error(exc))
    return evaluated


def _repl(args: argparse.Namespace, settings: Settings) -> int:
    print(f"{settings.app_title} {settings.app_version} (type '{settings.exit_command}' to quit)")
    run_repl(Calculator(), settings)
    return 0


def _eval(args: argparse.Namespace, settings: Settings) -> int:
    lines = args.expressions or [ln for ln in sys.stdin.read().splitlines() if ln.strip()]
    if not lines:
        print("Błąd: podaj wyrażenie jako argument lub przez stdin", file=sys.stderr)
        return 1

    calc = Calculator()
    status = 0
    for line in lines:
        try:
            print(format_number(calc.evaluate(line)))
        except CalculatorError as exc:
            print(_format_error(exc), file=sys.stderr)
            status = 2
    return status


def _rpn(args: argparse.Namespace, settings: Settings) -> int:
    expression = args.expression or sys.stdin.read().strip()
    calc = Calculator()
    try:
        result = calc.explain(expression)
    except CalculatorError as exc:
        print(_format_error(exc), file=sys.stderr)
        return 2

    _print_kv_table("Expression", [
        ("input", result.expression),
        ("postfix", " ".join(result.postfix) or "EMPTY"),
        ("assigned", result.assigned or "-"),
        ("value", format_number(result.value)),
    ])
    if result.steps:
        _print_steps_table(result.steps)
    return 0


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shuntcalc",
        description="ShuntCalc — kalkulator wyrażeń (shunting-yard + RPN)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # repl
    sub.add_parser("repl", help="Interaktywna pętla (wyjście: 'exit')")

    # eval
    p = sub.add_parser("eval", help="Oblicz wyrażenia w jednej instancji")
    p.add_argument("expressions", nargs="*", metavar="EXPR",
                   help="Wyrażenia (lub stdin, jedno na linię)")

    # rpn
    p = sub.add_parser("rpn", help="Pokaż postfix i kroki obliczeń")
    p.add_argument("expression", nargs="?", help="Wyrażenie (lub stdin)")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "repl": _repl,
        "eval": _eval,
        "rpn":  _rpn,
    }
    return commands[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
