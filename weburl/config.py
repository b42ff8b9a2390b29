import dotenv
import os

dotenv.load_dotenv(override=True)


class UrlConfig:
    verbose = max(0, min(4, int(os.getenv("DEBUG_VERBOSE") or "0")))
    """
    - When empty or <= 0, verbose logs are disabled.
    - When >= 1, log rejected inputs in `try_decode`.
    - When >= 2, also log every parsed URL.
    """


def unittest_configure() -> None:
    """Reset the settings that tests may override."""
    UrlConfig.verbose = 0
