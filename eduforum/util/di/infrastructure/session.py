"""Session store provider."""

from dishka import Scope, provide

from eduforum.domain.repository import SessionRepository
from eduforum.persistence.session_store import ProcessSessionStore
from eduforum.util.di.base import ProviderBase


class SessionStoreProvider(ProviderBase):
    """Process-held session store - concrete, shared by every request."""

    @provide(scope=Scope.APP)
    def get_session_repository(self) -> SessionRepository:
        """Provide the in-process session store."""
        return ProcessSessionStore()
