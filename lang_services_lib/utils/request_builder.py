"""
Fluent builder producing unsent ``requests.Request`` objects.

A builder is started with one of the HTTP‑verb class methods and collects the
query string, headers and exactly one body encoding:

* ``with_body_content`` – raw text with an explicit content type,
* ``with_body_json`` – a JSON‑serialisable object,
* ``with_form_file`` – one or more multipart file parts.

The URL stored in the built request is the *relative* path; the
:class:`~lang_services_lib.utils.http.HttpRequester` joins it with the service
endpoint right before the request is prepared.
"""

import os
from typing import Any, Dict, IO, Optional, Tuple, Union

import requests

from lang_services_lib.data_models.constants import HttpHeaders, HttpMediaType
from lang_services_lib.exceptions import LangServicesError

FileInput = Union[str, os.PathLike, IO[bytes]]


class RequestBuilder:
    """
    Accumulates the parts of one outbound HTTP request.

    Parameters
    ----------
    method : str
        HTTP verb (``GET``, ``POST``, ``PUT`` or ``DELETE``).
    path : str
        Path relative to the service endpoint, e.g. ``"/v2/models"``.
    """

    def __init__(self, method: str, path: str) -> None:
        self.method = method
        self.path = path
        self.query: Dict[str, str] = {}
        self.headers: Dict[str, str] = {}
        self.files: Dict[str, Tuple[str, bytes, str]] = {}
        self.json_body: Optional[Any] = None
        self.data: Optional[bytes] = None

    # ------------------------------------------------------------------ #
    @classmethod
    def get(cls, path: str) -> "RequestBuilder":
        return cls("GET", path)

    @classmethod
    def post(cls, path: str) -> "RequestBuilder":
        return cls("POST", path)

    @classmethod
    def put(cls, path: str) -> "RequestBuilder":
        return cls("PUT", path)

    @classmethod
    def delete(cls, path: str) -> "RequestBuilder":
        return cls("DELETE", path)

    # ------------------------------------------------------------------ #
    def with_query(self, name: str, value: Any) -> "RequestBuilder":
        """
        Add a query parameter.

        ``None`` is skipped, booleans are encoded as ``true``/``false`` and
        everything else through ``str``.
        """
        if value is None:
            return self
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.query[name] = str(value)
        return self

    def with_header(self, name: str, value: str) -> "RequestBuilder":
        self.headers[name] = value
        return self

    def with_body_content(self, content: str, media_type: str) -> "RequestBuilder":
        self._ensure_no_body()
        self.data = content.encode("utf-8")
        self.headers[HttpHeaders.CONTENT_TYPE] = media_type
        return self

    def with_body_json(self, body: Any) -> "RequestBuilder":
        self._ensure_no_body()
        self.json_body = body
        return self

    def with_form_file(
        self,
        name: str,
        file: FileInput,
        media_type: str = HttpMediaType.BINARY_FILE,
    ) -> "RequestBuilder":
        """
        Attach a file as a multipart form part.

        ``file`` may be a filesystem path or a binary file object; its content
        is read immediately so the built request can be sent more than once.
        The part's file name is the basename of the path (or of ``file.name``),
        falling back to ``name`` for file objects without a usable name.
        """
        if self.data is not None or self.json_body is not None:
            raise LangServicesError("Request already has a non-multipart body")

        if hasattr(file, "read"):
            # unnamed files (TemporaryFile, fdopen) carry an int descriptor
            file_name = getattr(file, "name", None)
            if isinstance(file_name, (str, bytes, os.PathLike)) and file_name:
                filename = os.path.basename(os.fsdecode(file_name))
            else:
                filename = name
            content = file.read()
        else:
            filename = os.path.basename(os.fspath(file))
            with open(file, "rb") as f:
                content = f.read()
        self.files[name] = (filename, content, media_type)
        return self

    # ------------------------------------------------------------------ #
    def build(self) -> requests.Request:
        return requests.Request(
            method=self.method,
            url=self.path,
            params=dict(self.query),
            headers=dict(self.headers),
            json=self.json_body,
            data=self.data,
            files=dict(self.files) or None,
        )

    def _ensure_no_body(self) -> None:
        if self.data is not None or self.json_body is not None or self.files:
            raise LangServicesError("Request body has already been set")
