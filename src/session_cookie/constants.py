"""Constants for session cookie configuration.

These defaults match what servlet-style runtimes substitute when host
code leaves an attribute unset.
"""

from __future__ import annotations

from typing import Final

# Cookie name used when no name was configured
DEFAULT_COOKIE_NAME: Final[str] = "JSESSIONID"

# Negative max-age: no Max-Age attribute, cookie lives for the browser session
DEFAULT_MAX_AGE: Final[int] = -1

# Path used when neither the config nor the context provides one
DEFAULT_CONTEXT_PATH: Final[str] = "/"

# Legacy Version attribute value emitted once a comment has been set
VERSIONED_COOKIE_VERSION: Final[int] = 1

# Version attribute value for plain (unversioned) cookies
UNVERSIONED_COOKIE_VERSION: Final[int] = 0
