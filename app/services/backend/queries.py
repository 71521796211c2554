"""Backend query builders.

The backend accepts filters as JSON-encoded strings passed through the
``queries[]`` request parameter.
"""
import json
from typing import Any, List, Optional


class Query:
    """Factory for JSON-encoded backend queries."""

    @staticmethod
    def _encode(method: str, attribute: Optional[str] = None, values: Optional[List[Any]] = None) -> str:
        payload = {"method": method}
        if attribute is not None:
            payload["attribute"] = attribute
        if values is not None:
            payload["values"] = values
        return json.dumps(payload, separators=(",", ":"))

    @staticmethod
    def equal(attribute: str, value: Any) -> str:
        """Match rows whose attribute equals the value (or any of the values)."""
        values = value if isinstance(value, list) else [value]
        return Query._encode("equal", attribute, values)

    @staticmethod
    def search(attribute: str, text: str) -> str:
        """Full-text search on an indexed attribute."""
        return Query._encode("search", attribute, [text])

    @staticmethod
    def limit(count: int) -> str:
        """Limit the number of returned rows."""
        return Query._encode("limit", values=[count])
