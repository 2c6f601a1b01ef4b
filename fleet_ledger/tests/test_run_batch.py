"""
Tests for the command-line batch runner.
"""
import json
from run_batch import main


def test_main_writes_report(tmp_path, batch_payload):
    """A batch file is processed and its report written as JSON."""
    input_path = tmp_path / "data.json"
    output_path = tmp_path / "output.json"
    input_path.write_text(json.dumps(batch_payload), encoding="utf-8")

    assert main([str(input_path), str(output_path), "--style", "level6"]) == 0

    report = json.loads(output_path.read_text(encoding="utf-8"))
    entries = report["rental_modifications"]
    assert [item["id"] for item in entries] == [1, 2]
    assert [item["rental_id"] for item in entries] == [1, 3]
    assert entries[0]["actions"][0] == {"who": "driver", "type": "debit", "amount": 2700}


def test_main_reports_rejected_records_and_succeeds(tmp_path, batch_payload):
    """Rejected records are logged, the rest of the report is still written."""
    batch_payload["cars"].append(None)
    input_path = tmp_path / "data.json"
    output_path = tmp_path / "output.json"
    input_path.write_text(json.dumps(batch_payload), encoding="utf-8")

    assert main([str(input_path), str(output_path), "--style", "price"]) == 0
    report = json.loads(output_path.read_text(encoding="utf-8"))
    assert [item["id"] for item in report["rentals"]] == [1, 2, 3]


def test_main_missing_input(tmp_path):
    """A missing input file fails the run without writing anything."""
    output_path = tmp_path / "output.json"
    assert main([str(tmp_path / "missing.json"), str(output_path)]) == 1
    assert not output_path.exists()


def test_main_unknown_style(tmp_path, batch_payload):
    """An unknown report style fails the run."""
    input_path = tmp_path / "data.json"
    input_path.write_text(json.dumps(batch_payload), encoding="utf-8")
    assert main([str(input_path), str(tmp_path / "output.json"), "--style", "level9"]) == 1


def test_main_invalid_json(tmp_path):
    """A file that is not JSON fails the run."""
    input_path = tmp_path / "data.json"
    input_path.write_text("{not json", encoding="utf-8")
    assert main([str(input_path), str(tmp_path / "output.json")]) == 1
