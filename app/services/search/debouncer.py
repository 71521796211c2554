"""Search input debouncing."""
import logging
from typing import Optional

from app.services.navigation.state import NavigationState
from app.services.search.timer import TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

DEFAULT_QUIET_INTERVAL = 1.0


class SearchDebouncer:
    """Coalesces keystrokes and commits the query to navigation state.

    The displayed text follows every keystroke. The committed ``query``
    parameter only changes once the input has been quiet for
    ``quiet_interval`` seconds, or immediately on submit.
    """

    def __init__(
        self,
        navigation: NavigationState,
        scheduler: Optional[TimerScheduler] = None,
        quiet_interval: float = DEFAULT_QUIET_INTERVAL,
    ):
        self.navigation = navigation
        self.scheduler = scheduler or TimerScheduler()
        self.quiet_interval = quiet_interval
        self.text: str = navigation.get("query") or ""
        self._pending: Optional[TimerHandle] = None

    @property
    def committed_query(self) -> Optional[str]:
        return self.navigation.get("query")

    @property
    def has_pending_commit(self) -> bool:
        return self._pending is not None

    def on_change_text(self, text: str) -> None:
        """Show the text now and reschedule the commit."""
        self.text = text
        self._cancel_pending()
        self._pending = self.scheduler.schedule(
            self.quiet_interval, lambda: self._commit_after_quiet(text)
        )

    def on_submit(self) -> None:
        """Commit the current text immediately, if it is not blank."""
        self._cancel_pending()
        query = self.text.strip()
        if query:
            self._commit(query)

    def close(self) -> None:
        """Drop any pending commit."""
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        self.scheduler.cancel(self._pending)
        self._pending = None

    def _commit_after_quiet(self, text: str) -> None:
        self._pending = None
        query = text.strip()
        if query:
            self._commit(query)
        else:
            logger.debug("Search cleared")
            self.navigation.set_params(query=None)

    def _commit(self, text: str) -> None:
        logger.debug(f"Search committed: {text!r}")
        self.navigation.set_params(query=text)
