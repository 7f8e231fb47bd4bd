"""Runtime environments of the Paper Share API.

Selects log rendering and the expected authorization setup: production
runs against the relationship graph, local and test runs usually do not.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Machine-read environments log JSON; development logs for humans."""
        return self is not Environment.DEVELOPMENT
