"""AI gateway: drafts tasks from a goal and summarizes a project's tasks.

Both operations soft-fail: a missing credential, an empty or unparseable
response, or any provider error is logged and turned into an empty draft
list or a fixed placeholder string, so callers never handle AI errors.
"""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from avocado.application.interfaces.chat_provider import ChatProvider
from avocado.application.schemas import TaskCreate
from avocado.domain.entities import ChatMessage, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

# ── Placeholder summaries ─────────────────────────────────────────────

SUMMARY_NO_CREDENTIAL = "AI Summary unavailable (No API Key)."
SUMMARY_NO_TASKS = "No tasks to summarize."
SUMMARY_EMPTY_RESPONSE = "Could not generate summary."
SUMMARY_ERROR = "Error generating summary."

# ── Prompts ───────────────────────────────────────────────────────────

_BREAKDOWN_PROMPT = (
    'Break down the project management goal: "{goal}" into 4-8 actionable tasks. '
    "Return a JSON list."
)
_SUMMARY_PROMPT = (
    "Summarize the current status of this project based on these tasks in 2-3 "
    "sentences. Be professional and encouraging:\n\n{task_list}"
)

_TASK_BREAKDOWN_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name": "task_breakdown",
        "schema": {
            "type": "object",
            "properties": {
                "tasks": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {
                                "type": "string",
                                "description": "Concise task title",
                            },
                            "description": {
                                "type": "string",
                                "description": "Short description of what needs to be done",
                            },
                            "priority": {
                                "type": "string",
                                "enum": [p.value for p in TaskPriority],
                            },
                        },
                        "required": ["title", "priority"],
                    },
                },
            },
            "required": ["tasks"],
        },
    },
}

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


class AIGatewayService:
    """Thin request/response wrapper around a chat provider.

    ``chat_provider`` is None when no API key is configured.
    """

    def __init__(
        self,
        chat_provider: ChatProvider | None,
        model: str,
        summary_model: str | None = None,
    ):
        self._provider = chat_provider
        self._model = model
        self._summary_model = summary_model or model

    @property
    def is_available(self) -> bool:
        return self._provider is not None

    async def generate_tasks(self, project_id: str, goal: str) -> list[TaskCreate]:
        """Ask the model for 4 to 8 draft tasks for ``goal``; [] on any failure."""
        if self._provider is None:
            logger.warning("No API key configured for AI task generation")
            return []

        try:
            result = await self._provider.complete(
                [ChatMessage.user(_BREAKDOWN_PROMPT.format(goal=goal))],
                self._model,
                response_format=_TASK_BREAKDOWN_FORMAT,
            )
            if not result.content.strip():
                logger.warning("AI task generation returned an empty response")
                return []
            if result.truncated:
                logger.warning("AI task breakdown hit the token limit; parsing what arrived")
            items = self._parse_items(result.content)
        except Exception:
            logger.exception("AI task generation failed, returning no drafts")
            return []

        drafts = [d for d in (self._to_draft(project_id, item) for item in items) if d]
        logger.info("AI drafted %d tasks for project %s", len(drafts), project_id)
        return drafts

    async def summarize(self, tasks: list[Task]) -> str:
        """Return a short prose status summary, or a placeholder string."""
        if self._provider is None:
            return SUMMARY_NO_CREDENTIAL
        if not tasks:
            return SUMMARY_NO_TASKS

        task_list = "\n".join(
            f"- [{t.status.value}] {t.title} ({t.priority.value})" for t in tasks
        )
        try:
            result = await self._provider.complete(
                [ChatMessage.user(_SUMMARY_PROMPT.format(task_list=task_list))],
                self._summary_model,
            )
        except Exception:
            logger.exception("AI summary failed")
            return SUMMARY_ERROR

        return result.content.strip() or SUMMARY_EMPTY_RESPONSE

    # ── Parsing ─────────────────────────────────────────────────────

    @staticmethod
    def _parse_items(content: str) -> list[dict[str, Any]]:
        """Accept a bare JSON array or ``{"tasks": [...]}``, optionally fenced."""
        match = _FENCE_RE.search(content)
        text = match.group(1) if match else content
        data = json.loads(text)
        if isinstance(data, dict):
            data = data.get("tasks")
        if not isinstance(data, list):
            raise ValueError("expected a JSON list of tasks")
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _to_draft(project_id: str, item: dict[str, Any]) -> TaskCreate | None:
        title = str(item.get("title") or "").strip()
        if not title:
            return None
        try:
            priority = TaskPriority(str(item.get("priority", "")).upper())
        except ValueError:
            priority = TaskPriority.MEDIUM
        try:
            return TaskCreate(
                project_id=project_id,
                title=title,
                description=str(item.get("description") or ""),
                status=TaskStatus.TODO,
                priority=priority,
            )
        except ValidationError as exc:
            logger.warning("Skipping unusable AI draft %r: %s", title, exc)
            return None
