"""
main.py

Точка входа в систему сравнения проектов.

Запуск:
    python main.py first/project.json second/project.json
    python main.py first second -c targets sources -v
    python main.py first second --format html --out report.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from projdiff.comparators import (
    ALL_AVAILABLE_COMPARATORS,
    ComparatorType,
    ResolvedSettingsComparator,
    select_comparators,
)
from projdiff.core import ComparatorParameters, Mode, ProjDiffError, handle_exception, load_config
from projdiff.core.constants import EXIT_CODES, OUTPUT_FORMATS, TOOL_NAME, VERSION
from projdiff.engine import ProjectComparatorFactory

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Сравнение двух описаний проектов",
    )

    parser.add_argument("first", nargs="?", help="Первый проект (файл или каталог с project.json)")
    parser.add_argument("second", nargs="?", help="Второй проект")

    parser.add_argument(
        "-c", "--comparators",
        nargs="+",
        help="Компараторы: all, default или список тегов (по умолчанию: default)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=sorted(OUTPUT_FORMATS.values()),
        help="Формат отчёта (по умолчанию: console)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="Подробный отчёт")
    parser.add_argument("-d", "--differences-only", action="store_true", default=None,
                        help="Выводить только различия")
    parser.add_argument("--continue-after-error", action="store_true", default=None,
                        help="Не прерывать сравнение при ошибке компаратора")

    parser.add_argument("-t", "--target", action="append", dest="targets",
                        help="Сравнивать только указанный таргет (можно повторять)")
    parser.add_argument("--configuration", action="append", dest="configurations",
                        help="Сравнивать только указанную конфигурацию (можно повторять)")

    parser.add_argument("--config", help="JSON-файл конфигурации")
    parser.add_argument("--out", help="Файл для сохранения отчёта (по умолчанию stdout)")
    parser.add_argument("-l", "--list", action="store_true", help="Список доступных компараторов")
    parser.add_argument("--version", action="version", version=f"{TOOL_NAME} {VERSION}")

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Переопределения конфигурации из аргументов командной строки."""
    overrides: Dict[str, Any] = {"comparison": {}, "output": {}}

    if args.comparators:
        comparators = args.comparators
        overrides["comparison"]["comparators"] = comparators[0] if len(comparators) == 1 else comparators
    if args.differences_only is not None:
        overrides["comparison"]["differences_only"] = True
    if args.continue_after_error is not None:
        overrides["comparison"]["continue_after_error"] = True
    if args.format:
        overrides["output"]["format"] = args.format
    if args.verbose is not None:
        overrides["output"]["verbose"] = True

    return overrides


def configure_comparators(config: Dict[str, Any]) -> List[ComparatorType]:
    selected = select_comparators(config["comparison"]["comparators"])
    resolved_config = config.get("resolved_settings", {})
    return [
        ComparatorType.of(ResolvedSettingsComparator(config=resolved_config))
        if c.tag == ResolvedSettingsComparator.TAG else c
        for c in selected
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.list:
        print("\n".join(str(c.comparator()) for c in ALL_AVAILABLE_COMPARATORS))
        return EXIT_CODES["SUCCESS"]

    if not args.first or not args.second:
        print("Необходимо указать два проекта", file=sys.stderr)
        return EXIT_CODES["FAILURE"]

    try:
        config = load_config(args.config, build_overrides(args))

        logging.basicConfig(
            level=getattr(logging, str(config["general"]["log_level"]).upper(), logging.WARNING),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

        comparator = ProjectComparatorFactory.create(
            comparators=configure_comparators(config),
            mode=Mode.from_config(config),
            config=config,
        )
        parameters = ComparatorParameters.from_names(args.targets, args.configurations)

        result = comparator.compare(args.first, args.second, parameters)
    except ProjDiffError as e:
        logger.debug("Детали ошибки: %s", handle_exception(e))
        print(f"Критическая ошибка сравнения: {e}", file=sys.stderr)
        return EXIT_CODES["FAILURE"]

    # --- Экспорт ---
    if args.out:
        path = Path(args.out)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.output, encoding="utf-8")
    elif result.output:
        sys.stdout.write(result.output)

    return EXIT_CODES["SUCCESS"] if result.success else EXIT_CODES["DIFFERENCES"]


if __name__ == "__main__":
    raise SystemExit(main())
