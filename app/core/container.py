"""Application state containers."""
import logging
from typing import Optional

import httpx

from app.core.config import Settings
from app.services.auth.store import AuthStore
from app.services.backend.client import BackendClient
from app.services.cart.store import CartStore
from app.services.identity.service import IdentityService
from app.services.menu.backend_menu import BackendMenuProvider
from app.services.menu.base import MenuProvider
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.menu.repository import MenuRepository
from app.services.navigation.state import NavigationState
from app.services.search.debouncer import SearchDebouncer

logger = logging.getLogger(__name__)


class ClientContainer:
    """Owns one instance of every client-side store and service.

    Lifecycle: create, ``hydrate`` on startup, mutate through the API,
    ``dispose`` on shutdown.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        menu_provider: Optional[MenuProvider] = None,
        identity: Optional[IdentityService] = None,
    ):
        self.settings = settings
        self.backend = BackendClient(settings, transport=transport)
        self.identity = identity or IdentityService(self.backend, settings)
        self.menu_repository = MenuRepository(
            provider=menu_provider or self._default_menu_provider()
        )
        self.navigation = NavigationState()
        self.search = SearchDebouncer(
            self.navigation, quiet_interval=settings.search_debounce_seconds
        )
        self.cart = CartStore()
        self.auth = AuthStore(self.identity)

    def _default_menu_provider(self) -> MenuProvider:
        if self.settings.menu_source == "yaml":
            return InMemoryMenuProvider(menu_file=self.settings.menu_file)
        return BackendMenuProvider(self.backend, self.settings)

    async def hydrate(self) -> None:
        """Restore the auth session."""
        session = await self.auth.hydrate()
        logger.info(f"Auth hydrated - authenticated: {session.is_authenticated}")

    async def dispose(self) -> None:
        """Cancel pending timers and close connections."""
        self.search.close()
        await self.backend.close()
