"""
Deferred handle for a single service operation.

Every public service method returns a :class:`ServiceCall` instead of
performing I/O directly.  The caller then picks how to run it:

>>> models = service.get_models().execute()            # blocking
>>> future = service.get_models().enqueue(print)       # non-blocking

Both paths share the same transport and converter, so success and failure
are reported through the same channel: ``execute`` returns or raises, while
``enqueue`` invokes exactly one of the callbacks and resolves the returned
``concurrent.futures.Future`` with the same result or exception.
"""

import logging
from concurrent.futures import CancelledError, Executor, Future
from typing import Callable, Generic, Optional, TypeVar

import requests

from lang_services_lib.services.converters import ResponseConverter
from lang_services_lib.utils.http import HttpRequester

T = TypeVar("T")


class ServiceCall(Generic[T]):
    """
    Unexecuted request bound to its converter and transport.

    Parameters
    ----------
    request : requests.Request
        Built request with a path relative to the service endpoint.
    converter : ResponseConverter
        Strategy turning the response into the typed result.
    http : HttpRequester
        Transport used to send the request.
    executor_factory : Callable[[], Executor]
        Returns the pool used by :meth:`enqueue`; called lazily so that a
        purely blocking caller never starts threads.
    """

    def __init__(
        self,
        request: requests.Request,
        converter: ResponseConverter[T],
        http: HttpRequester,
        executor_factory: Callable[[], Executor],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.request = request
        self.converter = converter
        self.http = http
        self._executor_factory = executor_factory
        self.logger = logger or logging.getLogger(__name__)

    def execute(self) -> T:
        """
        Send the request and convert the response on the calling thread.

        Raises
        ------
        ServiceResponseError
            For any non‑2xx status.
        DeserializationError
            When the body does not match the expected shape.
        requests.RequestException
            For transport failures, unchanged.
        """
        resp = self.http.send(self.request)
        return self.converter.convert(resp)

    def enqueue(
        self,
        on_response: Optional[Callable[[T], None]] = None,
        on_failure: Optional[Callable[[Exception], None]] = None,
    ) -> "Future[T]":
        """
        Run :meth:`execute` on the service's thread pool.

        ``on_response`` receives the converted result, ``on_failure`` the
        raised exception; the returned future is resolved either way.  An
        exception raised inside a callback is logged and does not change the
        future's outcome.
        """
        executor = self._executor_factory()
        future = executor.submit(self.execute)

        def _done(f: "Future[T]") -> None:
            if f.cancelled():
                error = CancelledError(f"{self!r} was cancelled")
            else:
                error = f.exception()
            try:
                if error is None:
                    if on_response is not None:
                        on_response(f.result())
                elif on_failure is not None:
                    on_failure(error)
            except Exception:
                self.logger.exception(
                    "Callback of %s %s raised",
                    self.request.method,
                    self.request.url,
                )

        if on_response is not None or on_failure is not None:
            future.add_done_callback(_done)
        return future

    def to_future(self) -> "Future[T]":
        return self.enqueue()

    def __repr__(self) -> str:
        return f"ServiceCall({self.request.method} {self.request.url})"
