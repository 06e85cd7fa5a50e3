"""Unit tests for the HTTP surface."""

import os
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from csvso.main import app


def _write_csv(directory: str, name: str, text: str) -> str:
    path = Path(directory) / name
    path.write_bytes(text.encode("cp932"))
    return str(path)


class TestApi(unittest.TestCase):
    """Unit tests for the /generate, /import and /export endpoints."""

    def setUp(self) -> None:
        self.client = TestClient(app)
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name
        self.output_folder = os.path.join(self.tmpdir, "so")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_should_run_all_actions(self) -> None:
        # arrange
        csv_path = _write_csv(self.tmpdir, "Items.csv", "# ID,Name\nid,name\nint,string\n1,a\n")
        body = {
            "csv_path": csv_path,
            "output_folder": self.output_folder,
            "implement_identifiable": True,
            "export_path": os.path.join(self.tmpdir, "out.csv"),
        }

        # act
        generated = self.client.post("/generate", json=body)
        imported = self.client.post("/import", json=body)
        exported = self.client.post("/export", json=body)

        # assert
        self.assertEqual(generated.status_code, 200)
        self.assertEqual(generated.json()["status"], "SUCCESS")
        self.assertTrue(generated.json()["identifiable"])
        self.assertEqual(imported.json()["records"], 1)
        self.assertEqual(exported.status_code, 200)
        self.assertIn("request_id", exported.json())

    def test_should_return_400_without_csv(self) -> None:
        response = self.client.post("/generate", json={"output_folder": self.output_folder})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["error_type"], "MissingInputError")

    def test_should_return_422_for_malformed_schema(self) -> None:
        csv_path = _write_csv(self.tmpdir, "Bad.csv", "# a\nx,y\nint\n")
        response = self.client.post(
            "/generate", json={"csv_path": csv_path, "output_folder": self.output_folder}
        )
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["status"], "ERROR")

    def test_should_return_404_for_unknown_type(self) -> None:
        csv_path = _write_csv(self.tmpdir, "Items.csv", "# a\nid\nint\n")
        response = self.client.post(
            "/import", json={"csv_path": csv_path, "output_folder": self.output_folder}
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"]["error_type"], "TypeNotFoundError")

    def test_should_return_404_for_missing_asset(self) -> None:
        csv_path = _write_csv(self.tmpdir, "Items.csv", "# a\nid\nint\n")
        body = {"csv_path": csv_path, "output_folder": self.output_folder}
        self.client.post("/generate", json=body)
        response = self.client.post("/export", json=body)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"]["error_type"], "AssetNotFoundError")

    def test_should_return_422_for_corrupt_asset(self) -> None:
        csv_path = _write_csv(self.tmpdir, "Items.csv", "# a\nid\nint\n")
        body = {"csv_path": csv_path, "output_folder": self.output_folder}
        self.client.post("/generate", json=body)
        Path(self.output_folder, "ItemsSO.asset").write_text("entries: [unclosed\n", encoding="utf-8")
        response = self.client.post("/export", json=body)
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["error_type"], "ArtifactFormatError")

    def test_should_return_500_detail_when_export_target_is_directory(self) -> None:
        csv_path = _write_csv(self.tmpdir, "Items.csv", "# a\nid\nint\n1\n")
        body = {"csv_path": csv_path, "output_folder": self.output_folder, "export_path": self.tmpdir}
        self.client.post("/generate", json=body)
        self.client.post("/import", json=body)
        response = self.client.post("/export", json=body)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"]["error_type"], "OutputWriteError")
