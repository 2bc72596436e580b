import json
import unittest
from typing import Any, Dict, Optional
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import requests

ENDPOINT = "https://example.test/api"


def make_response(
    status: int = 200,
    json_body: Any = None,
    content: Optional[bytes] = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    if json_body is not None:
        resp._content = json.dumps(json_body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = content if content is not None else b""
    if headers:
        resp.headers.update(headers)
    return resp


class BaseServiceTest(unittest.TestCase):
    """
    Runs a service against a mocked ``Session.send``.

    Requests are still prepared by a real ``requests.Session`` so the tests
    can inspect the exact URL, headers and body that would go on the wire.
    """

    service_cls = None

    def setUp(self):
        if self.service_cls is None:
            self.skipTest("no service under test")
        self.service = self.service_cls(
            endpoint=ENDPOINT, username="user", password="secret"
        )
        self.send = MagicMock(return_value=make_response(json_body={}))
        self.service.http.session.send = self.send

    def tearDown(self):
        self.service.close()

    def respond_with(self, **kwargs) -> None:
        self.send.return_value = make_response(**kwargs)

    def sent_request(self) -> requests.PreparedRequest:
        self.send.assert_called_once()
        return self.send.call_args[0][0]

    def sent_path(self) -> str:
        return urlsplit(self.sent_request().url).path

    def sent_query(self) -> Dict[str, list]:
        return parse_qs(urlsplit(self.sent_request().url).query)

    def sent_json(self) -> Any:
        return json.loads(self.sent_request().body)
