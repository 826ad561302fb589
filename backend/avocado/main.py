"""Application entry point: boots and tears down the application context."""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from avocado.config import Settings, get_settings
from avocado.application.interfaces import ChatProvider, KeyValueStore
from avocado.application.services.latency import Sleep
from avocado.infrastructure.database import Base
from avocado.infrastructure.dependencies import AppContext, build_app_context
from avocado.infrastructure.logging.colored_logger import OperationLogger, OperationStage
from avocado.infrastructure.logging.log_config import setup_logging

oplog = OperationLogger("avocado.main")


async def _create_tables(context: AppContext) -> None:
    """Create the key-value table when the database backend is in use."""
    if context.engine is None:
        return
    async with context.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
    chat_provider: ChatProvider | None = None,
    sleep: Sleep | None = None,
) -> AsyncIterator[AppContext]:
    """Application lifespan: prepare storage, restore the session, clean up on exit.

    Usage:
        async with lifespan() as ctx:
            user = await ctx.auth.login("admin@avocado.com")
    """
    settings = settings or get_settings()
    setup_logging(settings)

    context = build_app_context(
        settings, store=store, chat_provider=chat_provider, sleep=sleep
    )
    try:
        with oplog.timed_step(
            OperationStage.STORAGE, "Preparing storage", backend=settings.storage_backend
        ):
            await _create_tables(context)
            await context.storage.initialize()

        with oplog.timed_step(OperationStage.SESSION, "Restoring session"):
            user = await context.auth.restore_session()
        if user is not None:
            oplog.detail("Signed in", email=user.email, role=user.role.value)

        oplog.step_complete(OperationStage.STARTUP, f"{settings.app_title} ready")
        yield context
    finally:
        await context.close()
