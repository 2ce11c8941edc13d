#!/usr/bin/env python3

import json

import pytest
from click.testing import CliRunner

from json_to_ts import __version__
from json_to_ts.cli_utils import reconstruct_command_line
from json_to_ts.json_to_ts import json_to_ts

USER_JSON = '{"id": 1, "user_name": "john_doe", "roles": ["admin", "user"]}'


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test the json_to_ts command"""

    def test_stdin_to_stdout(self, runner):
        result = runner.invoke(json_to_ts, [], input='{"a": 1}')
        assert result.exit_code == 0, result.output
        assert result.output == "interface RootObject {\n  a: number;\n}\n"

    def test_root_name_from_file_name(self, runner, tmp_path):
        path = tmp_path / "user_profile.json"
        path.write_text(USER_JSON)

        result = runner.invoke(json_to_ts, [str(path)])
        assert result.exit_code == 0, result.output
        assert "interface UserProfile {" in result.output

    def test_explicit_name(self, runner, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(USER_JSON)

        result = runner.invoke(json_to_ts, [str(path), "--name", "Account"])
        assert result.exit_code == 0, result.output
        assert "interface Account {" in result.output

    def test_flags(self, runner):
        result = runner.invoke(
            json_to_ts,
            ["--detect-enums", "--camel-case", "--mark-optional", "-n", "RootObject"],
            input=USER_JSON,
        )
        assert result.exit_code == 0, result.output
        assert 'enum RootObjectRolesEnum {\n  admin = "admin",\n  user = "user"\n}' in result.output
        assert "  userName?: string;" in result.output
        assert "  roles?: RootObjectRolesEnum[];" in result.output

    def test_no_strict_null_checks(self, runner):
        result = runner.invoke(json_to_ts, ["--no-strict-null-checks"], input='{"m": null}')
        assert result.exit_code == 0, result.output
        assert "  m: any;" in result.output

    def test_output_file(self, runner, tmp_path):
        source = tmp_path / "user.json"
        source.write_text(USER_JSON)
        target = tmp_path / "user.ts"

        result = runner.invoke(json_to_ts, [str(source), str(target)])
        assert result.exit_code == 0, result.output
        assert result.output == ""
        assert target.read_text(encoding="utf-8").startswith("interface User {\n  id: number;")

    def test_config_file_with_flag_override(self, runner, tmp_path):
        config_path = tmp_path / "options.json"
        config_path.write_text(json.dumps({"detectEnums": True, "markOptional": True}))

        result = runner.invoke(json_to_ts, ["-c", str(config_path), "--no-mark-optional"], input=USER_JSON)
        assert result.exit_code == 0, result.output
        assert "enum RootObjectRolesEnum" in result.output
        assert "?:" not in result.output

    def test_invalid_config_file(self, runner, tmp_path):
        config_path = tmp_path / "options.json"
        config_path.write_text("[1, 2]")

        result = runner.invoke(json_to_ts, ["-c", str(config_path)], input=USER_JSON)
        assert result.exit_code == 2
        assert "--config" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(json_to_ts, [], input="{oops")
        assert result.exit_code == 1
        assert "Invalid JSON:" in result.output

    def test_invalid_utf8_file(self, runner, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"a": "\xff"}')

        result = runner.invoke(json_to_ts, [str(path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Invalid JSON:" in result.output

    def test_config_file_rejects_non_boolean_values(self, runner, tmp_path):
        config_path = tmp_path / "options.json"
        config_path.write_text(json.dumps({"detectEnums": "false"}))

        result = runner.invoke(json_to_ts, ["-c", str(config_path)], input=USER_JSON)
        assert result.exit_code == 2
        assert "detect_enums" in result.output

    def test_sample(self, runner):
        result = runner.invoke(json_to_ts, ["--sample", "--detect-enums"])
        assert result.exit_code == 0, result.output
        assert "enum RootObjectRolesEnum {" in result.output
        assert "interface RootObjectProfile {" in result.output

    def test_generation_comment(self, runner):
        result = runner.invoke(json_to_ts, ["--sample", "--detect-enums", "--no-strict-null-checks", "--add-generation-comment"])
        assert result.exit_code == 0, result.output

        lines = result.output.splitlines()
        assert lines[0] == f"// Generated by json_to_ts {__version__}"
        assert lines[1].startswith("// json_to_ts")
        assert "--detect-enums" in lines[1]
        assert "--no-strict-null-checks" in lines[1]
        assert "--sample" in lines[1]
        assert "--camel-case" not in lines[1]
        assert lines[2] == ""
        assert lines[3].startswith("enum ")


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(json_to_ts) == "json_to_ts"


if __name__ == "__main__":
    pytest.main([__file__])
