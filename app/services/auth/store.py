"""Client-side authentication state."""
import logging
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from app.services.identity.models import User
from app.services.identity.service import IdentityService

logger = logging.getLogger(__name__)


class AuthStatus(str, Enum):
    """Authentication states."""

    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class AuthSession(BaseModel):
    """Projection of the auth store exposed to the UI."""

    is_authenticated: bool = False
    user: Optional[User] = None
    is_loading: bool = True


class AuthStore:
    """Tri-state auth flag hydrated from the identity service.

    Starts in LOADING. ``hydrate`` restores the session once per launch and
    always ends in AUTHENTICATED or UNAUTHENTICATED. Sign-in and sign-out
    move between the two terminal states afterwards.
    """

    def __init__(self, identity: IdentityService):
        self.identity = identity
        self.is_authenticated = False
        self.user: Optional[User] = None
        self.is_loading = True

    @property
    def status(self) -> AuthStatus:
        if self.is_loading:
            return AuthStatus.LOADING
        if self.is_authenticated:
            return AuthStatus.AUTHENTICATED
        return AuthStatus.UNAUTHENTICATED

    def snapshot(self) -> AuthSession:
        return AuthSession(
            is_authenticated=self.is_authenticated,
            user=self.user,
            is_loading=self.is_loading,
        )

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def set_user(self, user: Optional[User]) -> None:
        """Replace the profile of an authenticated session."""
        if user is not None and not self.is_authenticated:
            raise ValueError("Cannot set a user on an unauthenticated session")
        self.user = user

    def set_authenticated(self, user: User) -> None:
        self.is_authenticated = True
        self.user = user

    def set_unauthenticated(self) -> None:
        self.is_authenticated = False
        self.user = None

    async def hydrate(self) -> AuthSession:
        """Restore the session and load the signed-in user, failing closed."""
        self.set_loading(True)
        try:
            if await self.identity.restore_session():
                user = await self.identity.get_current_user()
                self.set_authenticated(user)
            else:
                self.set_unauthenticated()
        except Exception as e:
            logger.warning(f"Auth hydration failed: {e}")
            self.set_unauthenticated()
        finally:
            self.set_loading(False)
        return self.snapshot()
