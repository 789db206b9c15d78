"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, not_found_body="Nothing here")
    """

    # Show tracebacks in 500 responses
    debug: bool = False

    # Path dispatched when the server hands over an empty path
    default_path: str = "/"

    # Body of the response when no route matches
    not_found_body: str = "Controller Not Found"
    not_found_content_type: str = "text/plain; charset=utf-8"

    # Limits
    max_content_length: int = 16 * 1024 * 1024  # 16 MB
