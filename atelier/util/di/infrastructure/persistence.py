"""Persistence component: PostgreSQL repositories sharing one session."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from atelier.config import Settings
from atelier.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    FollowRepository,
    LikeRepository,
    NotificationRepository,
)
from atelier.persistence.database import create_engine, create_session_factory
from atelier.persistence.repository import (
    PostgresAccountRepository,
    PostgresCommentRepository,
    PostgresContentRepository,
    PostgresFollowRepository,
    PostgresLikeRepository,
    PostgresNotificationRepository,
)
from atelier.util.di.base import ProviderBase
from atelier.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where repositories keep their state."""

    __component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL through asyncpg."""

    __in_memory__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the process lifetime, disposed with the container."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Every repository resolved in the request shares it, so a like's
        credit, points and record change commit together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                )
                raise
            await session.commit()

    accounts = provide(
        PostgresAccountRepository, provides=AccountRepository, scope=Scope.REQUEST
    )
    content = provide(
        PostgresContentRepository, provides=ContentRepository, scope=Scope.REQUEST
    )
    likes = provide(
        PostgresLikeRepository, provides=LikeRepository, scope=Scope.REQUEST
    )
    follows = provide(
        PostgresFollowRepository, provides=FollowRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    notifications = provide(
        PostgresNotificationRepository,
        provides=NotificationRepository,
        scope=Scope.REQUEST,
    )
