import importlib.util
import json
import os

import pytest

EVALUATION_PATH = os.path.abspath(
	os.path.join(os.path.dirname(__file__), '..', 'evaluation', 'evaluation.py')
)


@pytest.fixture(scope="module")
def evaluation():
	spec = importlib.util.spec_from_file_location("evaluation", EVALUATION_PATH)
	module = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(module)
	return module


def test_samples_cover_edge_cases(evaluation):
	samples = evaluation.build_samples(size=128)
	assert samples["empty"] == b""
	assert samples["all_byte_values"] == bytes(range(256))
	assert set(samples["single_byte_repeated"]) == {0x41}
	assert len(samples["random_bytes"]) == 128


def test_report_written(evaluation, tmp_path):
	output = tmp_path / "report.json"
	assert evaluation.main(["--output", str(output), "--size", "512"]) == 0

	report = json.loads(output.read_text())
	assert report["success"] is True
	assert report["results"]["summary"]["failed"] == 0
	assert {s["name"] for s in report["results"]["samples"]} == set(evaluation.build_samples(size=8))
	assert "python_version" in report["environment"]
	assert len(report["run_id"]) == 8
