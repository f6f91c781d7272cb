"""Tests for JSON vector persistence."""

import json

import pytest

from ecvectors.vectors.types import VectorFail, VectorSuccess
from ecvectors.vectors.writer import VectorWriter


class _Unserializable:
    def to_json(self):
        return {"input": object()}


class TestVectorRecords:
    def test_success_json(self):
        v = VectorSuccess(input=b"\x01\xab", expected=b"\x00", name="case")
        assert v.to_json() == {"input": "01ab", "expected": "00", "name": "case"}

    def test_success_without_name(self):
        v = VectorSuccess(input=b"", expected=b"\x01")
        assert v.to_json() == {"input": "", "expected": "01"}

    def test_fail_json(self):
        v = VectorFail(input=b"\xff", expected_error="invalid input length", name="short")
        assert v.to_json() == {
            "input": "ff",
            "expected_error": "invalid input length",
            "name": "short",
        }


class TestVectorWriter:
    def test_writes_list(self, tmp_path):
        writer = VectorWriter(tmp_path)
        vectors = [
            VectorSuccess(input=b"\x01", expected=b"\x02", name="a"),
            VectorSuccess(input=b"\x03", expected=b"\x04", name="b"),
        ]
        path = writer.write("bls12377_g1_add", vectors)
        assert path == tmp_path / "bls12377_g1_add.json"
        assert json.loads(path.read_text()) == [
            {"input": "01", "expected": "02", "name": "a"},
            {"input": "03", "expected": "04", "name": "b"},
        ]

    def test_creates_output_dir(self, tmp_path):
        writer = VectorWriter(tmp_path / "nested" / "out")
        path = writer.write("bw6_pairing_fail", [])
        assert path.exists()
        assert json.loads(path.read_text()) == []

    def test_overwrites(self, tmp_path):
        writer = VectorWriter(tmp_path)
        writer.write("x", [VectorSuccess(input=b"\x01", expected=b"\x01")])
        path = writer.write("x", [VectorSuccess(input=b"\x02", expected=b"\x02")])
        assert json.loads(path.read_text()) == [{"input": "02", "expected": "02"}]

    def test_no_temporary_files_left(self, tmp_path):
        VectorWriter(tmp_path).write("x", [])
        assert [p.name for p in tmp_path.iterdir()] == ["x.json"]

    def test_failure_cleans_up(self, tmp_path):
        writer = VectorWriter(tmp_path)
        with pytest.raises(TypeError):
            writer.write("broken", [_Unserializable()])
        assert list(tmp_path.iterdir()) == []

    def test_failure_keeps_previous_file(self, tmp_path):
        writer = VectorWriter(tmp_path)
        path = writer.write("kept", [VectorSuccess(input=b"\x01", expected=b"\x01")])
        before = path.read_text()
        with pytest.raises(TypeError):
            writer.write("kept", [_Unserializable()])
        assert path.read_text() == before
        assert [p.name for p in tmp_path.iterdir()] == ["kept.json"]
