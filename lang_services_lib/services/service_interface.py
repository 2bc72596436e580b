"""
Shared base for every service client.

:class:`BaseService` owns the endpoint, the credentials and the transport of
one remote service.  Concrete clients build requests with
:class:`RequestBuilder` and hand them to :meth:`create_service_call`
together with a response converter; they never touch ``requests`` directly.

Settings not passed to the constructor are read from the environment
(``LANG_SERVICES_<SERVICE_NAME>_URL``, ``_USERNAME``, ``_PASSWORD``,
``_APIKEY``) and finally from the client's ``default_url``.
"""

import abc
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from importlib import metadata
from typing import Dict, Optional

import requests

from lang_services_lib import config
from lang_services_lib.data_models.constants import HttpHeaders
from lang_services_lib.exceptions import LangServicesError
from lang_services_lib.services.converters import ResponseConverter
from lang_services_lib.services.service_call import ServiceCall
from lang_services_lib.utils.http import HttpRequester


def _user_agent() -> str:
    try:
        version = metadata.version("lang-services")
    except metadata.PackageNotFoundError:
        version = "dev"
    return f"lang-services-python/{version}"


class BaseService(abc.ABC):
    """
    Abstract base class for service clients.

    Sub‑classes must set ``service_name`` (used for environment lookup) and
    ``default_url`` (the public endpoint of the service).

    Parameters
    ----------
    endpoint : Optional[str]
        Overrides the environment and ``default_url``.
    username, password : Optional[str]
        HTTP basic credentials.
    api_key : Optional[str]
        Bearer key, used only when no username is configured.
    timeout : int
        Per‑request timeout in seconds.
    retries : int
        Transport retry attempts; ``0`` disables retrying.
    max_workers : int
        Size of the pool used by :meth:`ServiceCall.enqueue`.
    executor : Optional[Executor]
        Externally managed pool; when given, :meth:`close` leaves it running.
    logger : Optional[logging.Logger]
        Logger instance used for debugging and error reporting.
    """

    service_name: str = ""
    default_url: str = ""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: int = config.DEFAULT_TIMEOUT,
        retries: int = config.DEFAULT_RETRIES,
        max_workers: int = config.DEFAULT_MAX_WORKERS,
        executor: Optional[Executor] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        keys = config.ServiceEnvKeys
        self.endpoint = (
            endpoint
            or config.service_env(self.service_name, keys.URL)
            or self.default_url
        )
        self.username = username or config.service_env(
            self.service_name, keys.USERNAME
        )
        self.password = password or config.service_env(
            self.service_name, keys.PASSWORD
        )
        self.api_key = api_key or config.service_env(self.service_name, keys.APIKEY)
        self.timeout = timeout
        self.retries = retries
        self.max_workers = max_workers
        self.default_headers: Dict[str, str] = {HttpHeaders.USER_AGENT: _user_agent()}
        self.logger = logger or logging.getLogger(__name__)

        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = threading.Lock()
        self._closed = False
        self.http = self._new_http()

    # ------------------------------------------------------------------ #
    def _new_http(self) -> HttpRequester:
        return HttpRequester(
            base_url=self.endpoint,
            username=self.username,
            password=self.password,
            api_key=self.api_key,
            timeout=self.timeout,
            retries=self.retries,
            default_headers=self.default_headers,
            logger=self.logger,
        )

    def _reconfigure(self) -> None:
        old = self.http
        self.http = self._new_http()
        old.close()

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._closed:
                raise LangServicesError(f"{self!r} is closed")
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix=self.service_name or "lang-services",
                )
            return self._executor

    # ------------------------------------------------------------------ #
    def get_name(self) -> str:
        return self.service_name

    def get_endpoint(self) -> str:
        return self.endpoint

    def set_endpoint(self, endpoint: str) -> None:
        self.endpoint = endpoint
        self._reconfigure()

    def set_username_and_password(self, username: str, password: str) -> None:
        self.username = username
        self.password = password
        self._reconfigure()

    def set_api_key(self, api_key: str) -> None:
        self.api_key = api_key
        self._reconfigure()

    def set_default_headers(self, headers: Dict[str, str]) -> None:
        """Replace the extra headers sent with every request (``User-Agent`` is kept)."""
        self.default_headers = {HttpHeaders.USER_AGENT: _user_agent()}
        self.default_headers.update(headers or {})
        self._reconfigure()

    def create_service_call(
        self, request: requests.Request, converter: ResponseConverter
    ) -> ServiceCall:
        return ServiceCall(
            request=request,
            converter=converter,
            http=self.http,
            executor_factory=self._get_executor,
            logger=self.logger,
        )

    # ------------------------------------------------------------------ #
    def close(self) -> None:
        """
        Release the transport and the owned pool.

        A closed service rejects further ``enqueue`` calls with
        :class:`LangServicesError`.
        """
        with self._executor_lock:
            self._closed = True
            executor, self._executor = self._executor, None
        if self._owns_executor and executor is not None:
            executor.shutdown(wait=True)
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(endpoint={self.endpoint!r})"
