"""Tests for the generation driver and command-line entry point."""

import json

import pytest

from ecvectors.common.config import BLS12_377_PROFILE, BW6_761_PROFILE, GeneratorConfig
from ecvectors.main import build_parser, main
from ecvectors.vectors.driver import generate_curve, generate_operation
from ecvectors.vectors.writer import VectorWriter


class TestGenerateOperation:
    def test_returns_both_lists(self):
        config = GeneratorConfig(num_tests=1, seed=3)
        success, fail = generate_operation(BLS12_377_PROFILE, "g1_add", config)
        assert len(success) == 3
        assert {v.name for v in fail} >= {"invalid_input_length_empty", "point_not_on_curve"}

    def test_independent_of_other_operations(self):
        alone = GeneratorConfig(num_tests=1, seed=3, operations=("g1_mul",))
        everything = GeneratorConfig(num_tests=1, seed=3)
        assert generate_operation(BW6_761_PROFILE, "g1_mul", alone) == \
            generate_operation(BW6_761_PROFILE, "g1_mul", everything)

    def test_seed_changes_output(self):
        a = generate_operation(BLS12_377_PROFILE, "g1_mul", GeneratorConfig(num_tests=1, seed=1))
        b = generate_operation(BLS12_377_PROFILE, "g1_mul", GeneratorConfig(num_tests=1, seed=2))
        assert a[0][0].input != b[0][0].input


class TestGenerateCurve:
    def test_file_names(self, tmp_path):
        config = GeneratorConfig(num_tests=1, seed=0, output_dir=tmp_path, operations=("g1_add", "g2_add"))
        written = generate_curve(BLS12_377_PROFILE, config, VectorWriter(tmp_path))
        assert [p.name for p in written] == [
            "bls12377_g1_add.json",
            "bls12377_g1_add_fail.json",
            "bls12377_g2_add.json",
            "bls12377_g2_add_fail.json",
        ]

    def test_fail_file_shape(self, tmp_path):
        config = GeneratorConfig(num_tests=1, seed=0, operations=("g1_mul",))
        generate_curve(BW6_761_PROFILE, config, VectorWriter(tmp_path))
        entries = json.loads((tmp_path / "bw6_g1_mul_fail.json").read_text())
        assert entries
        for entry in entries:
            assert set(entry) == {"input", "expected_error", "name"}


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.curve == "all"
        assert args.operation is None
        assert args.num_tests == 100
        assert args.seed is None
        assert args.max_attempts == 1000

    def test_repeatable_operation(self):
        args = build_parser().parse_args(["--operation", "g1_add", "--operation", "pairing"])
        assert args.operation == ["g1_add", "pairing"]

    def test_rejects_unknown_curve(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--curve", "bn254"])
        assert exc.value.code == 2


class TestMain:
    def _run(self, tmp_path, *extra, curve="bls12377"):
        main([
            "--curve", curve,
            "--operation", "g1_add",
            "--num-tests", "1",
            "--seed", "7",
            "--output-dir", str(tmp_path),
            *extra,
        ])

    def test_writes_files(self, tmp_path):
        self._run(tmp_path)
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "bls12377_g1_add.json",
            "bls12377_g1_add_fail.json",
        ]

    def test_writes_bw6_761_files(self, tmp_path):
        self._run(tmp_path, curve="bw6")
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "bw6_g1_add.json",
            "bw6_g1_add_fail.json",
        ]
        success = json.loads((tmp_path / "bw6_g1_add.json").read_text())
        assert [entry["name"] for entry in success] == ["g1_add_1", "g1_add_infinity", "g1_add_negation"]

    def test_reproducible(self, tmp_path):
        self._run(tmp_path / "a")
        self._run(tmp_path / "b")
        for name in ("bls12377_g1_add.json", "bls12377_g1_add_fail.json"):
            assert (tmp_path / "a" / name).read_bytes() == (tmp_path / "b" / name).read_bytes()

    def test_invalid_config_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            self._run(tmp_path, "--num-tests", "0")
        assert exc.value.code == 1

    def test_sampling_failure_exits(self, tmp_path, bls_backend, monkeypatch):
        monkeypatch.setattr(bls_backend.g1, "is_on_curve", lambda pt: True)
        with pytest.raises(SystemExit) as exc:
            self._run(tmp_path, "--max-attempts", "3")
        assert exc.value.code == 1
