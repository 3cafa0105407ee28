import unittest
from unittest import mock

import requests

from deadliner.download import download_image


def _response(status=200, content=b"\x89PNG..."):
    r = requests.Response()
    r.status_code = status
    r._content = content
    r.url = "https://example.com/bg.png"
    return r


class DownloadTests(unittest.TestCase):
    def test_returns_body(self):
        with mock.patch("deadliner.download.requests.get", return_value=_response()) as get:
            self.assertEqual(download_image("https://example.com/bg.png", timeout=4), b"\x89PNG...")
        self.assertEqual(get.call_args.kwargs["timeout"], 4)

    def test_http_error(self):
        with mock.patch("deadliner.download.requests.get", return_value=_response(status=404)):
            with self.assertRaises(requests.HTTPError):
                download_image("https://example.com/bg.png")

    def test_empty_body(self):
        with mock.patch("deadliner.download.requests.get", return_value=_response(content=b"")):
            with self.assertRaises(requests.HTTPError):
                download_image("https://example.com/bg.png")


if __name__ == "__main__":
    unittest.main()
