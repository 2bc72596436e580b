import threading
import unittest
from concurrent.futures import CancelledError, ThreadPoolExecutor

from lang_services_lib import LangServicesError, LanguageTranslation, NotFoundError
from lang_services_lib.services import converters
from lang_services_lib.services.service_call import ServiceCall
from lang_services_lib.utils.request_builder import RequestBuilder
from tests import base

WAIT = 5


class TestServiceCall(base.BaseServiceTest):
    service_cls = LanguageTranslation

    def test_nothing_is_sent_until_executed(self):
        call = self.service.get_models()

        self.send.assert_not_called()
        self.assertIn("GET /v2/models", repr(call))

    def test_call_can_be_executed_twice(self):
        self.respond_with(json_body={"models": []})
        call = self.service.get_models()

        call.execute()
        call.execute()

        self.assertEqual(self.send.call_count, 2)

    def test_enqueue_delivers_result_to_callback(self):
        self.respond_with(json_body={"languages": [{"language": "en", "confidence": 0.9}]})
        received = []
        done = threading.Event()

        def on_response(result):
            received.append(result)
            done.set()

        future = self.service.identify("hello").enqueue(on_response)

        self.assertEqual(future.result(timeout=WAIT)[0].language, "en")
        self.assertTrue(done.wait(WAIT))
        self.assertEqual(received[0][0].confidence, 0.9)

    def test_enqueue_delivers_error_to_failure_callback(self):
        self.respond_with(status=404, json_body={"error": "Model not found"})
        errors = []
        responses = []
        done = threading.Event()

        def on_failure(exc):
            errors.append(exc)
            done.set()

        future = self.service.get_model("missing").enqueue(responses.append, on_failure)

        self.assertIsInstance(future.exception(timeout=WAIT), NotFoundError)
        self.assertTrue(done.wait(WAIT))
        self.assertEqual(errors[0].status_code, 404)
        self.assertEqual(responses, [])

    def test_to_future_raises_through_result(self):
        self.respond_with(status=404, content=b"")

        future = self.service.delete_model("bad-id").to_future()

        with self.assertRaises(NotFoundError):
            future.result(timeout=WAIT)


    def test_cancelled_call_reports_failure(self):
        release = threading.Event()
        pool = ThreadPoolExecutor(max_workers=1)
        self.addCleanup(pool.shutdown)
        self.addCleanup(release.set)
        # occupy the only worker so the next submission stays pending
        pool.submit(release.wait, WAIT)

        call = ServiceCall(
            RequestBuilder.get("/v2/models").build(),
            converters.get_void(),
            self.service.http,
            lambda: pool,
        )
        errors = []
        responses = []

        future = call.enqueue(responses.append, errors.append)

        self.assertTrue(future.cancel())
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], CancelledError)
        self.assertEqual(responses, [])
        self.send.assert_not_called()

    def test_enqueue_after_close_is_rejected(self):
        self.respond_with(json_body={"models": []})
        self.service.get_models().enqueue().result(timeout=WAIT)

        self.service.close()

        with self.assertRaises(LangServicesError):
            self.service.get_models().enqueue()
        self.assertIsNone(self.service._executor)


if __name__ == "__main__":
    unittest.main()
