"""
utils/system.py

Запуск внешних инструментов сборки.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.exceptions import GenericError

logger = logging.getLogger(__name__)


class System(ABC):

    @abstractmethod
    def execute(self, command: List[str]) -> str:
        """Выполняет команду и возвращает stdout."""
        raise NotImplementedError


class DefaultSystem(System):

    def __init__(self, timeout_seconds: Optional[int] = None):
        self.timeout_seconds = timeout_seconds

    def execute(self, command: List[str]) -> str:
        logger.debug("Запуск: %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as exc:
            raise GenericError(f"Команда не найдена: {command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise GenericError(
                f"Команда {command[0]} не завершилась за {self.timeout_seconds}с"
            ) from exc
        except subprocess.CalledProcessError as exc:
            message = [
                f"Команда {command[0]} завершилась с кодом {exc.returncode}",
                f"stdout:\n{exc.stdout.strip()}" if exc.stdout else "stdout: <empty>",
                f"stderr:\n{exc.stderr.strip()}" if exc.stderr else "stderr: <empty>",
            ]
            raise GenericError("\n".join(message)) from exc
        return completed.stdout
