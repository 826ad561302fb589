"""Dependency wiring: builds the application context from settings."""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from avocado.config import Settings, get_settings
from avocado.application.interfaces import ChatProvider, KeyValueStore
from avocado.application.services import (
    AIGatewayService,
    AuthService,
    CommentService,
    ProjectService,
    SimulatedLatency,
    TaskService,
)
from avocado.application.services.latency import Sleep
from avocado.domain.entities import Session
from avocado.domain.exceptions import MissingCredentialError
from avocado.infrastructure.database import SQLAlchemyKeyValueStore, create_session_factory
from avocado.infrastructure.openrouter import OpenRouterClient
from avocado.infrastructure.storage import CollectionStorage, LocalJsonStore
from avocado.infrastructure.storage.repositories import (
    StorageCommentRepository,
    StorageProjectRepository,
    StorageSessionStore,
    StorageTaskRepository,
    StorageUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything the presentation layer needs, passed explicitly.

    ``session`` is the one signed-in-user pointer shared by all services.
    """

    settings: Settings
    session: Session
    storage: CollectionStorage
    auth: AuthService
    projects: ProjectService
    tasks: TaskService
    comments: CommentService
    ai: AIGatewayService
    engine: AsyncEngine | None = None

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_key_value_store(settings: Settings) -> tuple[KeyValueStore, AsyncEngine | None]:
    """Return the store selected by ``settings.storage_backend`` and its engine, if any."""
    if settings.storage_backend == "file":
        return LocalJsonStore(settings.storage_dir), None
    if settings.storage_backend == "database":
        engine, session_factory = create_session_factory(
            settings.database_url,
            echo=(settings.log_level_sql.upper() == "DEBUG"),
        )
        return SQLAlchemyKeyValueStore(session_factory), engine
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")


def build_chat_provider(settings: Settings) -> ChatProvider | None:
    """OpenRouter client, or None when no API key is configured."""
    try:
        return OpenRouterClient(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            app_name=settings.openrouter_app_name,
        )
    except MissingCredentialError:
        logger.warning("OPENROUTER_API_KEY is not configured; AI features are disabled.")
        return None


def build_app_context(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
    chat_provider: ChatProvider | None = None,
    sleep: Sleep | None = None,
) -> AppContext:
    """Wire repositories and services around one shared Session.

    ``store``, ``chat_provider`` and ``sleep`` override what the settings
    would select (tests inject fakes through them).
    """
    settings = settings or get_settings()

    engine = None
    if store is None:
        store, engine = build_key_value_store(settings)
    if chat_provider is None:
        chat_provider = build_chat_provider(settings)

    storage = CollectionStorage(store, namespace=settings.storage_namespace)
    session = Session()
    latency = SimulatedLatency(sleep) if sleep is not None else SimulatedLatency()

    users = StorageUserRepository(storage)
    projects = StorageProjectRepository(storage)
    tasks = StorageTaskRepository(storage)
    comments = StorageCommentRepository(storage)

    return AppContext(
        settings=settings,
        session=session,
        storage=storage,
        auth=AuthService(users, StorageSessionStore(storage), session, latency),
        projects=ProjectService(projects, tasks, session, latency),
        tasks=TaskService(tasks, projects, session, latency),
        comments=CommentService(comments, session, latency),
        ai=AIGatewayService(
            chat_provider,
            model=settings.task_generation_model,
            summary_model=settings.summary_model,
        ),
        engine=engine,
    )
