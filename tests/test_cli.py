"""Tests for the command-line entry point."""

import json
import math

import pytest

from lorentz_kernel.apps.kernel.main import EXIT_CONFIG, EXIT_DOMAIN, EXIT_OK, load_config, main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "kernel.yaml"
    path.write_text("log_level: WARNING\ntolerance: 1.0e-10\nprecision: 10\n")
    return str(path)


def run(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, (json.loads(out) if out else None)


class TestLoadConfig:

    def test_reads_yaml(self, config_file):
        assert load_config(config_file) == {"log_level": "WARNING", "tolerance": 1e-10, "precision": 10}

    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")) == {}

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: [unclosed\n")
        with pytest.raises(SystemExit):
            load_config(str(path))


class TestCommands:

    def test_boost_velocity(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "boost", "--velocity", "0.6", "0", "0")
        assert code == EXIT_OK
        assert out["boost"]["gamma"] == pytest.approx(1.25)
        assert out["boost"]["classification"]["is_proper"] is True

    def test_boost_superluminal(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "boost", "--velocity", "1.1", "0", "0")
        assert code == EXIT_DOMAIN
        assert out is None

    def test_boost_direction_with_velocity_rejected(self, capsys, config_file):
        code, _ = run(capsys, "--config", config_file, "boost",
                      "--velocity", "0.1", "0", "0", "--direction", "1", "0", "0")
        assert code == EXIT_CONFIG

    def test_boost_zero_direction(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "boost",
                        "--rapidity", "0.1", "0", "0", "--direction", "0", "0", "0")
        assert code == EXIT_CONFIG
        assert out is None

    def test_rotate(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "rotate", "0", "0", str(math.pi / 2))
        assert code == EXIT_OK
        assert out["rotate"]["matrix"][2][1] == pytest.approx(1.0)

    def test_classify_parity(self, capsys, config_file):
        entries = ["1", "0", "0", "0", "0", "-1", "0", "0", "0", "0", "-1", "0", "0", "0", "0", "-1"]
        code, out = run(capsys, "--config", config_file, "classify", *entries)
        assert code == EXIT_OK
        assert out["classify"]["is_valid"] is True
        assert out["classify"]["type"].startswith("O+(3,1)")

    def test_verify(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "verify")
        assert code == EXIT_OK
        assert out["verify"]["closure"] is True
        assert out["verify"]["jacobi"] is True

    def test_spinor(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "spinor", "boost", "0", "0", "1",
                        "--vector", "1", "0", "0", "0")
        assert code == EXIT_OK
        assert out["spinor"]["transformed"][3] == pytest.approx(math.sinh(1.0))

    def test_missing_config_uses_defaults(self, capsys, tmp_path):
        code, out = run(capsys, "--config", str(tmp_path / "none.yaml"), "--log-level", "WARNING",
                        "rotate", "0.1", "0", "0")
        assert code == EXIT_OK
        assert "rotate" in out

    def test_audit_flag(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file, "--audit", "boost", "--rapidity", "0.3", "0", "0")
        assert code == EXIT_OK
        assert out["audit"]["enabled"] is True
        assert out["audit"]["valid"] is True
        assert len(out["audit"]["last_hash"]) == 64

    def test_invalid_config_value(self, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("tolerance: not-a-number\n")
        code, out = run(capsys, "--config", str(path), "verify")
        assert code == EXIT_CONFIG
        assert out is None

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            main([])


if __name__ == "__main__":
    pytest.main([__file__])
