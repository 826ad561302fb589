"""Simulated network latency for the mock backend.

Each backend operation waits a fixed delay before touching storage, to
emulate a remote service. The delays are part of the backend's contract
and are not configurable; only the sleep function can be swapped (tests
record the delays instead of waiting).
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum

Sleep = Callable[[float], Awaitable[None]]


class BackendOperation(str, Enum):
    """Every latency-bearing mock-backend operation."""

    LOGIN = "login"
    LOGOUT = "logout"
    LIST_PROJECTS = "list_projects"
    CREATE_PROJECT = "create_project"
    DELETE_PROJECT = "delete_project"
    LIST_TASKS = "list_tasks"
    CREATE_TASK = "create_task"
    UPDATE_TASK = "update_task"
    DELETE_TASKS = "delete_tasks"
    LIST_COMMENTS = "list_comments"
    ADD_COMMENT = "add_comment"


OPERATION_LATENCY_S: dict[BackendOperation, float] = {
    BackendOperation.LOGIN: 0.6,
    BackendOperation.LOGOUT: 0.2,
    BackendOperation.LIST_PROJECTS: 0.4,
    BackendOperation.CREATE_PROJECT: 0.5,
    BackendOperation.DELETE_PROJECT: 0.3,
    BackendOperation.LIST_TASKS: 0.3,
    BackendOperation.CREATE_TASK: 0.3,
    BackendOperation.UPDATE_TASK: 0.1,
    BackendOperation.DELETE_TASKS: 0.2,
    BackendOperation.LIST_COMMENTS: 0.3,
    BackendOperation.ADD_COMMENT: 0.3,
}


class SimulatedLatency:
    """Awaits the fixed delay of a backend operation."""

    def __init__(self, sleep: Sleep = asyncio.sleep):
        self._sleep = sleep

    async def wait(self, operation: BackendOperation) -> None:
        await self._sleep(OPERATION_LATENCY_S[operation])
