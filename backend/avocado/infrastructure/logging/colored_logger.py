"""Colored operation logger: ANSI-colored console lines for backend operations.

Each line carries a stage badge so startup, storage preparation, session
restore and outbound AI calls are easy to tell apart in a terminal:

    💾 [STORAGE]  green
    🔑 [SESSION]  blue
    🤖 [AI]       magenta
    ⚙️ [STARTUP]  white
    ❌ failures   red
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator


# ── ANSI Color Codes ─────────────────────────────────────────────────

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_WHITE = "\033[97m"
_GRAY = "\033[90m"


# ── Stages ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Stage:
    label: str
    color: str
    icon: str

    def badge(self, *, bold: bool = False) -> str:
        weight = _BOLD if bold else ""
        return f"{self.color}{weight}{self.icon} [{self.label}]{_RESET}"


class OperationStage:
    """Stages used by the application."""

    STORAGE = Stage("STORAGE", _GREEN, "💾")
    SESSION = Stage("SESSION", _BLUE, "🔑")
    AI = Stage("AI", _MAGENTA, "🤖")
    STARTUP = Stage("STARTUP", _WHITE, "⚙️")


def _details(color: str, fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{k}={v}" for k, v in fields.items())
    return f" {color}({joined}){_RESET}"


# ── OperationLogger ──────────────────────────────────────────────────

class OperationLogger:
    """Color-coded logger bound to one component.

    Usage:
        oplog = OperationLogger("OpenRouterClient")
        with oplog.timed_step(OperationStage.AI, "chat completion", model=model):
            response = await client.post(...)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s %s%s%s%s", stage.badge(bold=True), stage.color, message, _RESET, _details(_GRAY, fields)
        )

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s %s✓ %s%s%s", stage.badge(), _GREEN, message, _RESET, _details(_GRAY, fields)
        )

    def step_error(self, stage: Stage, message: str, error: BaseException | None = None) -> None:
        cause = f" {_DIM}→ {type(error).__name__}: {error}{_RESET}" if error else ""
        self._logger.error(
            "%s%s❌ [%s]%s %s%s%s%s", _RED, _BOLD, stage.label, _RESET, _RED, message, _RESET, cause
        )

    def detail(self, message: str, **fields: Any) -> None:
        """Indented gray line under the current step."""
        self._logger.info("   %s├─ %s%s%s", _GRAY, message, _RESET, _details(_DIM, fields))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any) -> Iterator[None]:
        """Log start, then completion or failure with the elapsed time. Re-raises."""
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - started:.2f}s", exc)
            raise
        self.step_complete(stage, f"{message} in {time.perf_counter() - started:.2f}s", **fields)
