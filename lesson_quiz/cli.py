#!/usr/bin/env python3
"""
CLI de conteudo dos quizzes.

Uso:
    lesson-quiz validate
    lesson-quiz validate --content-dir content/ --strict --json
    lesson-quiz show srp-patterns-3
    lesson-quiz ts --output ../site/components/Quiz/quiz.models.ts
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_config
from .engine import QuizLintEngine, QuizRegistry
from .exceptions import NotFound, QuizError
from .models.content import plain_text
from .models.enums import LintSeverity
from .storage import ContentStore
from .typescript import generate_typescript

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _load(content_dir: Path) -> tuple[QuizRegistry, list[QuizError]]:
    registry = QuizRegistry()
    report = ContentStore(content_dir).populate(registry)
    registry.freeze()
    return registry, report.errors


def cmd_validate(args: argparse.Namespace) -> int:
    """Valida todo o conteudo: schema, nomes duplicados e lint."""
    registry, errors = _load(args.content_dir)
    lint = QuizLintEngine(disabled=args.disable)
    issues = lint.lint_all(registry)
    warnings = [i for i in issues if i.severity == LintSeverity.WARNING]

    failed = bool(errors) or (args.strict and bool(warnings))

    if args.json:
        print(
            json.dumps(
                {
                    "valid": not failed,
                    "quizzes": registry.names(),
                    "errors": [e.to_dict() for e in errors],
                    "lint": [i.model_dump(mode="json") for i in issues],
                },
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        print(f"Quizzes registrados: {len(registry)}")
        for error in errors:
            print(f"  [ERRO] {error}")
        for issue in issues:
            print(f"  [{issue.severity.value.upper()}] {issue.quiz}: {issue.rule} - {issue.message}")
        print("OK" if not failed else "FALHOU")

    return EXIT_INVALID if failed else EXIT_OK


def cmd_show(args: argparse.Namespace) -> int:
    """Mostra um quiz em texto simples."""
    registry, _ = _load(args.content_dir)
    try:
        record = registry.lookup(args.name)
    except NotFound as e:
        print(f"Erro: {e}", file=sys.stderr)
        return EXIT_INVALID

    print(f"{record.name} ({record.selection_mode.value})")
    print(plain_text(record.question))
    for i, variant in enumerate(record.variants):
        mark = "*" if i in record.meta.correct_answers else " "
        print(f"  [{mark}] {i}. {plain_text(variant.text)}")
    return EXIT_OK


def cmd_ts(args: argparse.Namespace) -> int:
    """Gera as interfaces TypeScript do contrato do quiz."""
    content = generate_typescript()
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(content, encoding="utf-8")
        print(f"Interfaces geradas em {args.output}")
    else:
        print(content)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(prog="lesson-quiz", description="Ferramentas de conteudo dos quizzes")
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=config.content_dir,
        help="Diretorio com <nome>/quiz.json (default: QUIZ_CONTENT_DIR ou conteudo do pacote)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs de debug")

    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Valida schema, nomes e lint")
    validate.add_argument(
        "--strict",
        action="store_true",
        default=config.strict_lint,
        help="Avisos de lint tambem falham (default: QUIZ_STRICT_LINT)",
    )
    validate.add_argument(
        "--disable",
        action="append",
        default=list(config.disabled_lint_rules),
        help="Regra de lint a ignorar (repetivel)",
    )
    validate.add_argument("--json", action="store_true", help="Saida em JSON")
    validate.set_defaults(func=cmd_validate)

    show = sub.add_parser("show", help="Mostra um quiz")
    show.add_argument("name", help="Nome do quiz")
    show.set_defaults(func=cmd_show)

    ts = sub.add_parser("ts", help="Gera interfaces TypeScript")
    ts.add_argument("--output", "-o", type=Path, help="Arquivo .ts de saida (default: stdout)")
    ts.set_defaults(func=cmd_ts)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as e:
        # Regra de lint desconhecida em --disable
        print(f"Erro: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
