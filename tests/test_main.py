import io
import json
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from typing import List, Tuple
from unittest import TestCase
from unittest.mock import patch

import httpx

import main
from pexels_api.pexels_client import PexelsClient
from pexels_api.settings import ClientConfig, Credentials
from pexels_api.transport import HttpxTransport

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class TestCli(TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.settings_path = Path(self.tmp_dir.name) / "settings.yaml"
        self.requests: List[httpx.Request] = []

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def _client(self, status_code: int, body: bytes) -> PexelsClient:
        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, content=body)

        transport = HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))
        return PexelsClient(ClientConfig(credentials=Credentials(api_key="test-key")), transport=transport)

    def _run(self, client: PexelsClient, *args: str) -> Tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with patch("main.build_client", return_value=client):
            with redirect_stdout(stdout), redirect_stderr(stderr):
                code = main.run(["--settings", str(self.settings_path), *args])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_search_photos_prints_json(self) -> None:
        client = self._client(200, (FIXTURES / "photos_search.json").read_bytes())

        code, out, _ = self._run(client, "search-photos", "--query", "nature", "--per-page", "10")

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(len(data["items"]), 2)
        self.assertEqual(data["items"][0]["type"], "Photo")
        self.assertEqual(dict(self.requests[0].url.params), {"query": "nature", "per_page": "10", "page": "1"})

    def test_search_media_passes_type_and_sort(self) -> None:
        client = self._client(200, (FIXTURES / "collection_media.json").read_bytes())

        code, out, _ = self._run(
            client, "search-media", "--query", "9mp14cx", "--per-page", "2", "--type", "videos", "--sort", "asc"
        )

        self.assertEqual(code, 0)
        self.assertEqual([item["type"] for item in json.loads(out)["items"]], ["Video", "Photo"])
        self.assertEqual(self.requests[0].url.params["type"], "videos")
        self.assertEqual(self.requests[0].url.params["sort"], "asc")

    def test_api_error_exit_code(self) -> None:
        client = self._client(404, b'{"status": 404, "code": "Not Found"}')

        code, out, err = self._run(client, "get-video", "--id", "3401900")

        self.assertEqual(code, main.EXIT_CODES[main.ApiError])
        self.assertEqual(out, "")
        self.assertIn("error:", err)
        self.assertIn("404", err)

    def test_invalid_parameter_exit_code(self) -> None:
        client = self._client(200, b"{}")

        code, _, err = self._run(client, "search-collections", "--per-page", "0")

        self.assertEqual(code, main.EXIT_CODES[main.InvalidParameter])
        self.assertIn("per_page", err)
        self.assertEqual(self.requests, [])

    def test_missing_api_key_exit_code(self) -> None:
        stderr = io.StringIO()
        with patch("pexels_api.settings.config", return_value=""):
            with redirect_stderr(stderr):
                code = main.run(["--settings", str(self.settings_path), "get-photo", "--id", "1"])

        self.assertEqual(code, main.EXIT_CODES[main.ConfigurationError])
        self.assertIn("PEXELS_API_KEY", stderr.getvalue())

    def test_default_per_page_comes_from_settings(self) -> None:
        self.settings_path.write_text("pexels:\n  default_per_page: 2\n", encoding="utf-8")
        client = self._client(200, (FIXTURES / "collections.json").read_bytes())

        code, _, _ = self._run(client, "featured-collections", "--page", "2")

        self.assertEqual(code, 0)
        self.assertEqual(self.requests[0].url.params["per_page"], "2")

    def test_malformed_settings_value_exit_code(self) -> None:
        self.settings_path.write_text("pexels:\n  timeout_seconds: soon\n", encoding="utf-8")
        stderr = io.StringIO()
        with patch("pexels_api.settings.config", return_value="test-key"):
            with redirect_stderr(stderr):
                code = main.run(["--settings", str(self.settings_path), "get-photo", "--id", "1"])

        self.assertEqual(code, main.EXIT_CODES[main.ConfigurationError])
        self.assertIn("timeout_seconds", stderr.getvalue())

    def test_malformed_default_per_page_exit_code(self) -> None:
        for text in ("pexels:\n  default_per_page: abc\n", "pexels: 3\n", "logging: loud\n"):
            with self.subTest(text=text):
                self.settings_path.write_text(text, encoding="utf-8")
                client = self._client(200, b"{}")

                code, out, err = self._run(client, "curated-photos")

                self.assertEqual(code, main.EXIT_CODES[main.ConfigurationError])
                self.assertEqual(out, "")
                self.assertIn("error:", err)
        self.assertEqual(self.requests, [])
