import os
from typing import Optional


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LANG_SERVICES_"


# Per-request timeout (seconds) passed to ``requests``
DEFAULT_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", "60").strip()
)

# Retries configured on the transport adapter; ``0`` disables retrying
DEFAULT_RETRIES = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}RETRIES", "0").strip()
)

# Size of the thread pool used for non-blocking calls
DEFAULT_MAX_WORKERS = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_WORKERS", "4").strip()
)


class ServiceEnvKeys:
    URL = "URL"
    USERNAME = "USERNAME"
    PASSWORD = "PASSWORD"
    APIKEY = "APIKEY"


def service_env(service_name: str, key: str) -> Optional[str]:
    """
    Read a per-service setting, e.g. ``LANG_SERVICES_LANGUAGE_TRANSLATION_URL``.

    Empty values are treated as missing.
    """
    env_name = f"{_DontChangeMe.MAIN_ENV_PREFIX}{service_name.upper()}_{key}"
    value = os.environ.get(env_name, "").strip()
    return value or None
