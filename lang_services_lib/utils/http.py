"""
Thin wrapper around ``requests`` that adds logging, authentication
and unified error handling.

The :class:`HttpRequester` class is the single transport used by every service
client.  It centralises:

* construction of absolute URLs from the service endpoint,
* attaching HTTP basic credentials or a bearer API key,
* an optional retry policy via ``urllib3.Retry`` (disabled by default),
* conversion of HTTP error codes into the library‑specific exception hierarchy
  (:class:`BadRequestError`, :class:`AuthenticationError`,
  :class:`NotFoundError`, :class:`RateLimitError`,
  :class:`InternalServerError`, :class:`ServiceResponseError`).

:meth:`HttpRequester.send` returns the raw ``requests.Response`` object after
the response has been validated by ``_handle_response``.
"""

import logging
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lang_services_lib.data_models.constants import (
    ERROR_MESSAGE_FIELDS,
    HttpHeaders,
)
from lang_services_lib.exceptions import (
    AuthenticationError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
    RateLimitError,
    ServiceResponseError,
)


class HttpRequester:
    """
    Helper for sending built requests to one service endpoint.

    Parameters
    ----------
    base_url : str
        Endpoint of the remote service
        (e.g. ``"https://gateway.watsonplatform.net/language-translation/api"``).
        A trailing slash is stripped automatically.
    username, password : Optional[str]
        Credentials for HTTP basic authentication.
    api_key : Optional[str]
        Used as ``Authorization: Bearer <api_key>`` when no username is set.
    timeout : int, default ``60``
        Per‑request timeout in seconds.
    retries : int, default ``0``
        Number of retry attempts for transient failures (status codes in
        ``status_forcelist``).  The back‑off factor is ``0.5`` seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: int = 60,
        retries: int = 0,
        default_headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.logger = logger or logging.getLogger(__name__)

        if default_headers:
            self.session.headers.update(default_headers)

        if username:
            self.session.auth = (username, password or "")
        elif api_key:
            self.session.headers.update(
                {HttpHeaders.AUTHORIZATION: f"Bearer {api_key}"}
            )

        # retry‑policy
        retry_strategy = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST", "PUT", "DELETE"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request.

        Parameters
        ----------
        path : str
            URL path to be appended to ``self.base_url``.  The method ensures
            exactly one ``/`` separates the base and the path.

        Returns
        -------
        str
            Fully qualified URL.
        """
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        """
        Extract the server message from an error response.

        JSON bodies are searched for the first of ``ERROR_MESSAGE_FIELDS``;
        anything else falls back to the raw text.
        """
        try:
            body = resp.json()
        except ValueError:
            return resp.text
        if isinstance(body, dict):
            for field in ERROR_MESSAGE_FIELDS:
                if body.get(field):
                    return str(body[field])
        return resp.text

    def _handle_response(self, resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library‑specific exceptions.

        The method examines ``resp.status_code`` and raises:

        * :class:`BadRequestError` for ``400``.
        * :class:`AuthenticationError` for ``401`` and ``403``.
        * :class:`NotFoundError` for ``404``.
        * :class:`RateLimitError` for ``429``.
        * :class:`InternalServerError` for any ``5xx``.
        * :class:`ServiceResponseError` for any other non‑2xx status.

        If the response is successful (2xx), it is returned unchanged.
        """
        status = resp.status_code
        if 200 <= status < 300:
            return resp

        message = self._error_message(resp)
        self.logger.warning(
            "%s %s failed with HTTP %d: %s",
            resp.request.method if resp.request is not None else "-",
            resp.url,
            status,
            message,
        )
        if status == 400:
            raise BadRequestError(status, message)
        if status in (401, 403):
            raise AuthenticationError(status, message)
        if status == 404:
            raise NotFoundError(status, message)
        if status == 429:
            raise RateLimitError(status, message)
        if 500 <= status < 600:
            raise InternalServerError(status, message)
        raise ServiceResponseError(status, message)

    def send(self, request: requests.Request) -> requests.Response:
        """
        Send a request produced by :class:`RequestBuilder`.

        The request's relative ``url`` is resolved against ``base_url``; the
        session's authentication and default headers are merged in.

        Parameters
        ----------
        request : requests.Request
            Unsent request whose ``url`` is a path relative to the endpoint.

        Returns
        -------
        requests.Response
            The validated response object.
        """
        outgoing = requests.Request(
            method=request.method,
            url=self._full_url(request.url),
            params=request.params,
            headers=request.headers,
            json=request.json,
            data=request.data,
            files=request.files,
        )
        prepared = self.session.prepare_request(outgoing)
        self.logger.debug("%s %s", prepared.method, prepared.url)
        resp = self.session.send(prepared, timeout=self.timeout)
        return self._handle_response(resp)

    def close(self) -> None:
        self.session.close()
