"""Shared navigation parameters."""
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class NavigationState:
    """Key-value route parameters shared between the search bar and the catalog.

    Setting a parameter to None removes it, mirroring how routers drop
    undefined search params.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._params: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        """Get a parameter value."""
        return self._params.get(key)

    def set_params(self, **params: Optional[str]) -> None:
        """Set or remove parameters."""
        for key, value in params.items():
            if value is None:
                self._params.pop(key, None)
            else:
                self._params[key] = value
        logger.debug(f"Navigation params updated: {self._params}")

    def as_dict(self) -> Dict[str, str]:
        """Copy of the current parameters."""
        return dict(self._params)
