"""
Tests for the gff command line.
"""

import json

import pytest
import yaml

from gff.cli import main
from gff.examples import build_contact_form, build_registration_modules
from gff.serialization import from_json, to_json, to_yaml


@pytest.fixture
def contact_json(tmp_path):
    path = tmp_path / "contact.json"
    path.write_text(to_json(build_contact_form()), encoding="utf-8")
    return path


def test_validate_ok(contact_json, capsys):
    assert main(["validate", str(contact_json)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("OK   contact.json - 7 fields")


def test_validate_reports_decode_failure(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    assert main(["validate", str(bad)]) == 1
    assert "FAIL bad.json" in capsys.readouterr().out


def test_validate_reports_invalid_form(tmp_path, capsys):
    doc = {
        "version": "1.0",
        "formId": "broken",
        "fields": [{"id": "s", "type": "select", "caption": "S", "params": {}}],
    }
    path = tmp_path / "broken.yaml"
    path.write_text(yaml.safe_dump(doc), encoding="utf-8")

    assert main(["validate", str(path)]) == 1
    out = capsys.readouterr().out
    assert "FAIL broken.yaml" in out
    assert "needs options or optionsFunction" in out


def test_merge_to_file(tmp_path):
    paths = []
    for form in build_registration_modules():
        path = tmp_path / f"{form.form_id}.json"
        path.write_text(to_json(form), encoding="utf-8")
        paths.append(str(path))
    out = tmp_path / "merged.json"

    assert main(["merge", *paths, "--form-id", "registration", "-o", str(out)]) == 0

    merged = from_json(out.read_text(encoding="utf-8"))
    assert merged.form_id == "registration"
    assert merged.field_ids().count("email") == 1


def test_merge_conflict(tmp_path, capsys):
    a = tmp_path / "a.json"
    b = tmp_path / "b.json"
    a.write_text(json.dumps({"version": "1.0", "formId": "a", "fields": [
        {"id": "age", "type": "number", "caption": "Age", "params": {"min": 18}},
    ]}), encoding="utf-8")
    b.write_text(json.dumps({"version": "1.0", "formId": "b", "fields": [
        {"id": "age", "type": "number", "caption": "Age", "params": {"min": 21}},
    ]}), encoding="utf-8")

    assert main(["merge", str(a), str(b)]) == 1
    assert 'Field ID "age" already exists' in capsys.readouterr().err


def test_convert_json_to_yaml(contact_json, capsys):
    assert main(["convert", str(contact_json), "--to", "yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["formId"] == "contact-form"


def test_convert_yaml_to_compact_json(tmp_path, capsys):
    path = tmp_path / "contact.yml"
    path.write_text(to_yaml(build_contact_form()), encoding="utf-8")

    assert main(["convert", str(path), "--to", "json", "--compact"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert '"formId":"contact-form"' in out


def test_missing_file(tmp_path, capsys):
    assert main(["convert", str(tmp_path / "nope.json"), "--to", "yaml"]) == 1
    assert "convert failed" in capsys.readouterr().err
