"""Unit tests for auth store hydration."""
import pytest
from unittest.mock import AsyncMock

from app.services.auth.store import AuthStatus, AuthStore
from app.services.identity.service import IdentityError


class TestInitialState:
    """Test the state before hydration."""

    def test_starts_loading(self, mock_identity):
        """Test that a new store is loading and signed out."""
        store = AuthStore(mock_identity)
        session = store.snapshot()

        assert store.status == AuthStatus.LOADING
        assert session.is_loading is True
        assert session.is_authenticated is False
        assert session.user is None


class TestHydrate:
    """Test session hydration."""

    @pytest.mark.asyncio
    async def test_session_restored(self, mock_identity, test_user):
        """Test that a restored session loads the user."""
        store = AuthStore(mock_identity)
        session = await store.hydrate()

        assert session.is_authenticated is True
        assert session.user == test_user
        assert session.is_loading is False
        assert store.status == AuthStatus.AUTHENTICATED

    @pytest.mark.asyncio
    async def test_no_session(self, mock_identity):
        """Test that no session leaves the user signed out without a profile fetch."""
        mock_identity.restore_session = AsyncMock(return_value=False)
        store = AuthStore(mock_identity)
        session = await store.hydrate()

        assert session.is_authenticated is False
        assert session.user is None
        assert session.is_loading is False
        mock_identity.get_current_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_profile_failure_fails_closed(self, mock_identity):
        """Test that a failing profile fetch ends signed out, not loading."""
        mock_identity.get_current_user = AsyncMock(
            side_effect=IdentityError("User data not found in table")
        )
        store = AuthStore(mock_identity)
        session = await store.hydrate()

        assert session.is_authenticated is False
        assert session.user is None
        assert session.is_loading is False
        assert store.status == AuthStatus.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_unexpected_error_fails_closed(self, mock_identity):
        """Test that any exception during hydration is contained."""
        mock_identity.restore_session = AsyncMock(side_effect=RuntimeError("network down"))
        store = AuthStore(mock_identity)
        session = await store.hydrate()

        assert session.is_authenticated is False
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_failed_hydration_clears_previous_user(self, mock_identity, test_user):
        """Test that re-hydrating after the session expired signs the user out."""
        store = AuthStore(mock_identity)
        await store.hydrate()
        assert store.user == test_user

        mock_identity.restore_session = AsyncMock(return_value=False)
        session = await store.hydrate()

        assert session.is_authenticated is False
        assert session.user is None

    @pytest.mark.asyncio
    async def test_no_automatic_retry(self, mock_identity):
        """Test that a failed hydration calls the identity service once."""
        mock_identity.get_current_user = AsyncMock(side_effect=IdentityError("boom"))
        store = AuthStore(mock_identity)
        await store.hydrate()

        assert mock_identity.restore_session.await_count == 1
        assert mock_identity.get_current_user.await_count == 1


class TestExplicitTransitions:
    """Test sign-in and sign-out transitions outside hydration."""

    def test_set_authenticated_then_unauthenticated(self, mock_identity, test_user):
        """Test that terminal states can be re-entered."""
        store = AuthStore(mock_identity)
        store.set_loading(False)

        store.set_authenticated(test_user)
        assert store.status == AuthStatus.AUTHENTICATED

        store.set_unauthenticated()
        assert store.status == AuthStatus.UNAUTHENTICATED
        assert store.user is None

    def test_set_user_requires_authentication(self, mock_identity, test_user):
        """Test that a user cannot be attached to a signed-out session."""
        store = AuthStore(mock_identity)

        with pytest.raises(ValueError):
            store.set_user(test_user)
