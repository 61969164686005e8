import inspect
import unittest
from unittest.mock import Mock, patch

from fastapi_mongo_error_handler import LOG_LABEL, create_error_handler


class MockResponse:
    """Chainable stand-in for a framework response object."""

    def __init__(self):
        self.status_code = None
        self.body = None
        self.json_calls = 0

    def status(self, code):
        self.status_code = code
        return self

    def json(self, body):
        self.json_calls += 1
        self.body = body
        return self


def _raised(message="Test error"):
    try:
        raise RuntimeError(message)
    except RuntimeError as exc:
        return exc


class ErrorHandlerUnitTest(unittest.TestCase):
    def setUp(self):
        self.request = {"method": "GET", "path": "/test"}
        self.response = MockResponse()
        self.next_ = Mock()
        self.logger = Mock()

    def test_has_error_middleware_arity(self):
        handler = create_error_handler(environment="production")
        self.assertTrue(callable(handler))
        self.assertEqual(len(inspect.signature(handler).parameters), 4)

    def test_emits_builtin_response_once(self):
        handler = create_error_handler({"log_errors": False})
        result = handler({"statusCode": 403, "message": "Access denied"}, self.request, self.response, self.next_)

        self.assertIs(result, self.response)
        self.assertEqual(self.response.json_calls, 1)
        self.assertEqual(self.response.status_code, 403)
        self.assertEqual(
            self.response.body,
            {"success": False, "message": "Access denied", "errors": ["Access denied"]},
        )
        self.next_.assert_not_called()

    def test_custom_handler_short_circuits(self):
        def teapot(error, request, response):
            return response.status(418).json({"success": False, "message": "teapot", "errors": []})

        later = Mock(return_value=None)
        handler = create_error_handler({"log_errors": False, "custom_handlers": [teapot, later]})
        handler({"name": "CastError"}, self.request, self.response, self.next_)

        later.assert_not_called()
        self.assertEqual(self.response.status_code, 418)
        self.assertEqual(self.response.json_calls, 1)
        self.assertEqual(self.response.body["message"], "teapot")

    def test_custom_handler_returning_nothing_continues(self):
        first = Mock(return_value=None)
        second = Mock(return_value=False)
        handler = create_error_handler({"log_errors": False, "custom_handlers": [first, second]})
        error = {"name": "CastError", "path": "_id", "value": "zzz"}
        handler(error, self.request, self.response, self.next_)

        first.assert_called_once_with(error, self.request, self.response)
        second.assert_called_once_with(error, self.request, self.response)
        self.assertEqual(self.response.status_code, 400)
        self.assertEqual(self.response.body["message"], "Invalid object ID")

    def test_custom_handler_result_is_returned(self):
        handler = create_error_handler(
            {"log_errors": False, "custom_handlers": [lambda err, req, res: {"handled": True}]}
        )
        result = handler({}, self.request, self.response, self.next_)
        self.assertEqual(result, {"handled": True})
        self.assertEqual(self.response.json_calls, 0)

    def test_logs_summary_before_dispatch(self):
        handler = create_error_handler({"log_errors": True, "logger": self.logger})
        handler({"name": "CastError", "code": 42, "message": "bad id"}, self.request, self.response, self.next_)

        self.logger.assert_called_once_with(
            LOG_LABEL, {"name": "CastError", "code": 42, "message": "bad id"}
        )

    def test_log_summary_for_exception(self):
        handler = create_error_handler({"log_errors": True, "logger": self.logger})
        handler(RuntimeError("Test error"), self.request, self.response, self.next_)

        self.logger.assert_called_once_with(
            LOG_LABEL, {"name": "RuntimeError", "code": None, "message": "Test error"}
        )

    def test_attribute_error_logged_under_class_name(self):
        try:
            None.email  # type: ignore[attr-defined]
        except AttributeError as exc:
            error = exc
        handler = create_error_handler({"log_errors": True, "logger": self.logger})
        handler(error, self.request, self.response, self.next_)

        self.assertEqual(self.logger.call_args.args[1]["name"], "AttributeError")
        self.assertEqual(self.response.status_code, 500)

    def test_no_logging_when_disabled(self):
        handler = create_error_handler(
            {"log_errors": False, "expose_stack": True, "logger": self.logger}, environment="development"
        )
        for error in ({}, _raised(), {"statusCode": 400, "stack": "trace"}):
            handler(error, self.request, MockResponse(), self.next_)
        self.logger.assert_not_called()

    def test_stack_logged_only_when_exposed(self):
        handler = create_error_handler({"log_errors": True, "expose_stack": True, "logger": self.logger})
        handler(_raised(), self.request, self.response, self.next_)
        label, details = self.logger.call_args.args
        self.assertEqual(label, LOG_LABEL)
        self.assertIsInstance(details["stack"], str)
        self.assertIn("RuntimeError: Test error", details["stack"])
        self.assertNotIn("stack", self.response.body)

        quiet = Mock()
        handler = create_error_handler({"log_errors": True, "logger": quiet})
        handler(_raised(), self.request, MockResponse(), self.next_)
        self.assertNotIn("stack", quiet.call_args.args[1])

    def test_stack_attribute_on_mapping(self):
        handler = create_error_handler({"log_errors": True, "expose_stack": True, "logger": self.logger})
        handler({"stack": "Error: boom\n  at x"}, self.request, self.response, self.next_)
        self.assertEqual(self.logger.call_args.args[1]["stack"], "Error: boom\n  at x")

        handler({"stack": ""}, self.request, MockResponse(), self.next_)
        self.assertNotIn("stack", self.logger.call_args.args[1])

    def test_environment_default(self):
        handler = create_error_handler({"logger": self.logger}, environment="development")
        handler(_raised(), self.request, self.response, self.next_)
        self.logger.assert_called_once()

        production_logger = Mock()
        handler = create_error_handler({"logger": production_logger}, environment="production")
        handler(_raised(), self.request, MockResponse(), self.next_)
        production_logger.assert_not_called()

    def test_environment_read_once_at_construction(self):
        with patch(
            "fastapi_mongo_error_handler.core.handler.load_environment", return_value="test"
        ) as loader:
            handler = create_error_handler({"logger": self.logger})
            handler({}, self.request, MockResponse(), self.next_)
            handler({}, self.request, MockResponse(), self.next_)
        loader.assert_called_once_with()
        self.assertEqual(self.logger.call_count, 2)

    def test_default_logger_writes_error_record(self):
        handler = create_error_handler({"log_errors": True})
        with self.assertLogs("fastapi_mongo_error_handler", level="ERROR") as captured:
            handler(RuntimeError("Test error"), self.request, self.response, self.next_)
        self.assertIn(LOG_LABEL, captured.output[0])
        self.assertIn("Test error", captured.output[0])

    def test_logger_failure_propagates(self):
        self.logger.side_effect = RuntimeError("logger down")
        handler = create_error_handler({"log_errors": True, "logger": self.logger})
        with self.assertRaises(RuntimeError):
            handler({}, self.request, self.response, self.next_)
        self.assertEqual(self.response.json_calls, 0)

    def test_handlers_are_independent_across_calls(self):
        handler = create_error_handler({"log_errors": False})
        first, second = MockResponse(), MockResponse()
        handler({"code": 11000, "keyPattern": {"email": 1}}, self.request, first, self.next_)
        handler({"name": "ZodError", "issues": []}, self.request, second, self.next_)
        self.assertEqual(first.status_code, 409)
        self.assertEqual(second.status_code, 400)
        self.assertEqual(second.body["errors"], [])


if __name__ == "__main__":
    unittest.main()
