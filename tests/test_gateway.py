import unittest
from unittest import mock

import requests

from jobhub.config import Settings
from jobhub.errors import ErrorKind, GatewayError, MalformedResponse
from jobhub.gateway import JSearchGateway
from jobhub.models import SearchQuery


def _response(status=200, reason="OK", payload=None):
    r = mock.Mock(status_code=status, reason=reason)
    r.json.return_value = payload if payload is not None else {"data": []}
    return r


class GatewayTests(unittest.TestCase):
    def setUp(self):
        self.settings = Settings(api_key="test-key", timeout=7.5)
        self.gateway = JSearchGateway(self.settings)
        patcher = mock.patch("jobhub.gateway.requests.get")
        self.get = patcher.start()
        self.addCleanup(patcher.stop)

    def test_search_request_shape(self):
        self.get.return_value = _response(payload={"data": [{"job_id": "a"}]})
        payload = self.gateway.search(SearchQuery("developer jobs in kerala"))

        self.assertEqual(payload, {"data": [{"job_id": "a"}]})
        args, kwargs = self.get.call_args
        self.assertEqual(args[0], "https://jsearch.p.rapidapi.com/search")
        self.assertEqual(kwargs["params"]["query"], "developer jobs in kerala")
        self.assertEqual(kwargs["params"]["date_posted"], "all")
        self.assertEqual(kwargs["headers"], {
            "X-RapidAPI-Key": "test-key",
            "X-RapidAPI-Host": "jsearch.p.rapidapi.com",
        })
        self.assertEqual(kwargs["timeout"], 7.5)

    def test_detail_request_shape(self):
        self.get.return_value = _response()
        self.gateway.job_details("abc==", "us")
        args, kwargs = self.get.call_args
        self.assertEqual(args[0], "https://jsearch.p.rapidapi.com/job-details")
        self.assertEqual(kwargs["params"], {"job_id": "abc==", "country": "us"})

    def test_payload_returned_verbatim(self):
        self.get.return_value = _response(payload={"status": "OK", "data": None})
        self.assertEqual(self.gateway.request("/search", {}), {"status": "OK", "data": None})

    def test_http_status_failure(self):
        self.get.return_value = _response(status=429, reason="Too Many Requests")
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.request("/search", {"query": "x"})
        err = ctx.exception
        self.assertEqual(err.status, 429)
        self.assertEqual(err.status_text, "Too Many Requests")
        self.assertEqual(err.cause, "http")
        self.assertEqual(err.kind, ErrorKind.HTTP_STATUS)

    def test_network_failure(self):
        self.get.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.request("/search", {})
        self.assertIsNone(ctx.exception.status)
        self.assertEqual(ctx.exception.cause, "network")
        self.assertEqual(ctx.exception.kind, ErrorKind.NETWORK)

    def test_timeout(self):
        self.get.side_effect = requests.ReadTimeout("read timed out")
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.request("/job-details", {"job_id": "a"})
        self.assertIsNone(ctx.exception.status)
        self.assertEqual(ctx.exception.cause, "timeout")

    def test_invalid_json(self):
        r = _response()
        r.json.side_effect = ValueError("Expecting value")
        self.get.return_value = r
        with self.assertRaises(MalformedResponse) as ctx:
            self.gateway.request("/search", {})
        self.assertEqual(ctx.exception.field, "body")

    def test_custom_base_url(self):
        gateway = JSearchGateway(Settings(api_key="k", base_url="http://localhost:8080/"))
        self.get.return_value = _response()
        gateway.request("search", {})
        self.assertEqual(self.get.call_args[0][0], "http://localhost:8080/search")


if __name__ == "__main__":
    unittest.main()
