"""Async REST client for the managed backend."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Lets the backend generate the identifier server-side
UNIQUE_ID = "unique()"

FALLBACK_COOKIES_HEADER = "X-Fallback-Cookies"


class BackendError(Exception):
    """Raised when the backend rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None, error_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type


class BackendClient:
    """Client for the account, tables, storage and avatars APIs."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.endpoint = settings.appwrite_endpoint.rstrip("/")
        self.project_id = settings.appwrite_project_id
        self.database_id = settings.appwrite_database_id
        self.bucket_id = settings.appwrite_bucket_id
        self._fallback_cookies: Optional[str] = None
        self._client = httpx.AsyncClient(
            base_url=self.endpoint,
            headers={
                "X-Appwrite-Project": self.project_id,
                "X-Appwrite-Response-Format": "1.7.0",
                "Origin": f"appwrite-android://{settings.appwrite_platform}",
            },
            timeout=30.0,
            transport=transport,
        )

    @staticmethod
    def unique_id() -> str:
        """Placeholder id the backend replaces with a generated one."""
        return UNIQUE_ID

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a request and return the decoded JSON body."""
        headers = {}
        if self._fallback_cookies:
            headers[FALLBACK_COOKIES_HEADER] = self._fallback_cookies

        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                params=params,
                files=files,
                data=data,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        fallback = response.headers.get(FALLBACK_COOKIES_HEADER)
        if fallback:
            self._fallback_cookies = fallback

        if response.status_code >= 400:
            message = response.text
            error_type = None
            try:
                body = response.json()
                message = body.get("message", message)
                error_type = body.get("type")
            except ValueError:
                pass
            raise BackendError(message, status_code=response.status_code, error_type=error_type)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"{method} {path} returned a non-JSON body", status_code=response.status_code
            ) from e

    # Account

    async def get_account(self) -> Dict[str, Any]:
        """Get the account of the current session."""
        return await self._request("GET", "/account")

    async def create_account(self, user_id: str, email: str, password: str, name: str) -> Dict[str, Any]:
        """Register a new account."""
        return await self._request(
            "POST",
            "/account",
            json={"userId": user_id, "email": email, "password": password, "name": name},
        )

    async def create_email_password_session(self, email: str, password: str) -> Dict[str, Any]:
        """Open a session with email and password."""
        return await self._request(
            "POST",
            "/account/sessions/email",
            json={"email": email, "password": password},
        )

    async def delete_session(self, session_id: str = "current") -> None:
        """Delete a session, the current one by default."""
        await self._request("DELETE", f"/account/sessions/{session_id}")
        if session_id == "current":
            self._fallback_cookies = None
            self._client.cookies.clear()

    # Tables

    def _rows_path(self, table_id: str) -> str:
        return f"/tablesdb/{self.database_id}/tables/{table_id}/rows"

    async def list_rows(self, table_id: str, queries: Optional[List[str]] = None) -> Dict[str, Any]:
        """List rows of a table, optionally filtered."""
        params = {"queries[]": queries} if queries else None
        return await self._request("GET", self._rows_path(table_id), params=params)

    async def create_row(
        self,
        table_id: str,
        data: Dict[str, Any],
        row_id: Optional[str] = None,
        permissions: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Create a row in a table."""
        payload = {"rowId": row_id or self.unique_id(), "data": data}
        if permissions is not None:
            payload["permissions"] = permissions
        return await self._request("POST", self._rows_path(table_id), json=payload)

    async def delete_row(self, table_id: str, row_id: str) -> None:
        """Delete a row from a table."""
        await self._request("DELETE", f"{self._rows_path(table_id)}/{row_id}")

    # Storage

    async def list_files(self) -> Dict[str, Any]:
        """List files in the configured bucket."""
        return await self._request("GET", f"/storage/buckets/{self.bucket_id}/files")

    async def create_file(
        self,
        file_name: str,
        content: bytes,
        content_type: str = "image/png",
        file_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Upload a file into the configured bucket."""
        return await self._request(
            "POST",
            f"/storage/buckets/{self.bucket_id}/files",
            data={"fileId": file_id or self.unique_id()},
            files={"file": (file_name, content, content_type)},
        )

    async def delete_file(self, file_id: str) -> None:
        """Delete a file from the configured bucket."""
        await self._request("DELETE", f"/storage/buckets/{self.bucket_id}/files/{file_id}")

    def file_view_url(self, file_id: str) -> str:
        """Public view URL of a file in the configured bucket."""
        return (
            f"{self.endpoint}/storage/buckets/{self.bucket_id}/files/{file_id}"
            f"/view?project={self.project_id}"
        )

    # Avatars

    def initials_url(self, name: str) -> str:
        """Avatar URL rendering the initials of a name."""
        query = urlencode({"name": name, "project": self.project_id})
        return f"{self.endpoint}/avatars/initials?{query}"
