"""Identity service backed by the backend account API."""
import logging
from typing import Any, Dict

from app.core.config import Settings
from app.services.backend.client import BackendClient, BackendError
from app.services.backend.queries import Query
from app.services.identity.models import User

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Raised when an identity operation fails."""


def user_from_row(row: Dict[str, Any]) -> User:
    """Shape a profile row into a User."""
    return User(
        id=row["$id"],
        account_id=row.get("accountId"),
        name=row.get("name", ""),
        email=row.get("email", ""),
        avatar=row.get("avatar"),
    )


class IdentityService:
    """Sign-up, sign-in, sign-out and session restore."""

    def __init__(self, client: BackendClient, settings: Settings):
        self.client = client
        self.user_table_id = settings.user_table_id

    async def create_user(self, email: str, password: str, name: str) -> User:
        """Create an account, sign in, and create its profile row."""
        try:
            account = await self.client.create_account(
                self.client.unique_id(), email, password, name
            )
            if not account:
                raise IdentityError("User creation failed")

            # Sign in right away so the profile row is created with a session
            await self.sign_in(email, password)

            avatar_url = self.client.initials_url(name)
            row = await self.client.create_row(
                self.user_table_id,
                data={
                    "email": email,
                    "name": name,
                    "accountId": account["$id"],
                    "avatar": avatar_url,
                },
                permissions=[],
            )
            return user_from_row(row)
        except (BackendError, IdentityError) as e:
            logger.error(f"create_user error: {e}", exc_info=True)
            raise IdentityError(str(e) or "create_user unknown error") from e

    async def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Replace any current session with a new email/password session."""
        try:
            try:
                await self.client.delete_session("current")
            except BackendError as e:
                logger.info(f"No current session to delete: {e}")

            return await self.client.create_email_password_session(email, password)
        except BackendError as e:
            logger.error(f"sign_in error: {e}", exc_info=True)
            raise IdentityError(str(e) or "sign_in unknown error") from e

    async def sign_out(self) -> None:
        """Delete the current session if there is one."""
        try:
            await self.client.delete_session("current")
        except BackendError as e:
            logger.info(f"No current session to delete: {e}")

    async def restore_session(self) -> bool:
        """Return True if the backend recognises a current session."""
        try:
            account = await self.client.get_account()
            return bool(account)
        except BackendError:
            return False

    async def get_current_user(self) -> User:
        """Fetch the profile row of the signed-in account."""
        try:
            if not await self.restore_session():
                raise IdentityError("No authenticated session")

            account = await self.client.get_account()
            result = await self.client.list_rows(
                self.user_table_id,
                queries=[Query.equal("accountId", [account["$id"]])],
            )
            rows = result.get("rows", [])
            if not rows:
                raise IdentityError("User data not found in table")

            return user_from_row(rows[0])
        except (BackendError, IdentityError) as e:
            logger.error(f"get_current_user error: {e}", exc_info=True)
            raise IdentityError(str(e) or "get_current_user unknown error") from e
