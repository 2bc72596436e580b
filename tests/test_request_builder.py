import io
import unittest

from lang_services_lib.exceptions import LangServicesError
from lang_services_lib.utils.request_builder import RequestBuilder


class TestRequestBuilder(unittest.TestCase):
    def test_query_encoding(self):
        request = (
            RequestBuilder.get("/v2/models")
            .with_query("default", True)
            .with_query("hidden", False)
            .with_query("source", None)
            .with_query("limit", 5)
            .build()
        )

        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url, "/v2/models")
        self.assertEqual(request.params, {"default": "true", "hidden": "false", "limit": "5"})

    def test_body_content_sets_content_type(self):
        request = RequestBuilder.post("/v2/identify").with_body_content(
            "zażółć", "text/plain"
        ).build()

        self.assertEqual(request.data, "zażółć".encode("utf-8"))
        self.assertEqual(request.headers["Content-Type"], "text/plain")

    def test_form_file_from_file_object(self):
        buffer = io.BytesIO(b"source\ttarget")
        buffer.name = "/tmp/corpora/parallel.tsv"

        request = (
            RequestBuilder.post("/v2/models")
            .with_form_file("parallel_corpus", buffer)
            .build()
        )

        self.assertEqual(
            request.files,
            {
                "parallel_corpus": (
                    "parallel.tsv",
                    b"source\ttarget",
                    "application/octet-stream",
                )
            },
        )

    def test_only_one_body_encoding(self):
        builder = RequestBuilder.post("/v2/translate").with_body_json({"text": ["a"]})

        with self.assertRaises(LangServicesError):
            builder.with_body_content("a", "text/plain")
        with self.assertRaises(LangServicesError):
            builder.with_form_file("forced_glossary", io.BytesIO(b"x"))


if __name__ == "__main__":
    unittest.main()
