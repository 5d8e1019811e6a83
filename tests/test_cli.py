import json

import pytest
from click.testing import CliRunner

from b64_serde.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_encode_text(runner):
    result = runner.invoke(cli, ["encode", "hello"])
    assert result.exit_code == 0
    assert result.output.strip() == "aGVsbG8="


def test_encode_file(runner, tmp_path):
    blob = tmp_path / "blob.bin"
    blob.write_bytes(b"\xfb\xff")
    result = runner.invoke(cli, ["encode", "--file", str(blob)])
    assert result.exit_code == 0
    assert result.output.strip() == "+/8="


def test_encode_requires_exactly_one_source(runner):
    result = runner.invoke(cli, ["encode"])
    assert result.exit_code == 1
    assert "❌" in result.output


def test_decode_to_stdout(runner):
    result = runner.invoke(cli, ["decode", "aGVsbG8="])
    assert result.exit_code == 0
    assert result.output.strip() == "hello"


def test_decode_to_file(runner, tmp_path):
    output = tmp_path / "out.bin"
    result = runner.invoke(cli, ["decode", "+/8=", "--output", str(output)])
    assert result.exit_code == 0
    assert output.read_bytes() == b"\xfb\xff"


def test_decode_rejects_invalid(runner):
    result = runner.invoke(cli, ["decode", "aGVsbG8"])
    assert result.exit_code == 1
    assert "❌" in result.output


def _write_json(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_dump_field_present(runner, tmp_path):
    doc = _write_json(tmp_path / "doc.json", {"content": "aGVsbG8="})
    result = runner.invoke(cli, ["dump-field", doc, "--field", "content"])
    assert result.exit_code == 0
    assert result.output.strip() == "5 bytes"


def test_dump_field_null(runner, tmp_path):
    doc = _write_json(tmp_path / "doc.json", {"content": None})
    result = runner.invoke(cli, ["dump-field", doc, "--field", "content"])
    assert result.exit_code == 0
    assert result.output.strip() == "null"


@pytest.mark.parametrize(
    "value,error_type",
    [(5, "unexpected_node_type"), ("not valid base64!", "invalid_base64")],
)
def test_dump_field_rejects(runner, tmp_path, value, error_type):
    doc = _write_json(tmp_path / "doc.json", {"content": value})
    result = runner.invoke(cli, ["dump-field", doc, "--field", "content"])
    assert result.exit_code == 1
    assert error_type in result.output


def test_dump_field_missing(runner, tmp_path):
    doc = _write_json(tmp_path / "doc.json", {"other": None})
    result = runner.invoke(cli, ["dump-field", doc, "--field", "content"])
    assert result.exit_code == 1


def test_config_file_enables_file_logging(runner, tmp_path):
    log_path = tmp_path / "logs" / "b64.log"
    conf = tmp_path / "b64.toml"
    conf.write_text(
        f'[b64_serde.log_config]\nlevel = "debug"\nlog_path = "{log_path.as_posix()}"\n',
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["--conf", str(conf), "decode", "aGVsbG8"])
    assert result.exit_code == 1
    assert log_path.exists()
    assert "解码失败" in log_path.read_text(encoding="utf-8")


def test_invalid_config_file(runner, tmp_path):
    conf = tmp_path / "b64.toml"
    conf.write_text('[log_config]\nlevel = "LOUD"\n', encoding="utf-8")
    result = runner.invoke(cli, ["--conf", str(conf), "encode", "hello"])
    assert result.exit_code == 1
    assert "log_config.level" in result.output


def test_missing_config_file(runner, tmp_path):
    result = runner.invoke(cli, ["--conf", str(tmp_path / "missing.toml"), "encode", "hello"])
    assert result.exit_code == 1
    assert "❌" in result.output


@pytest.mark.parametrize("content", [b"{not json", b'{"content": "\xff\xfe"}'])
def test_dump_field_unreadable_json(runner, tmp_path, content):
    doc = tmp_path / "doc.json"
    doc.write_bytes(content)
    result = runner.invoke(cli, ["dump-field", str(doc), "--field", "content"])
    assert result.exit_code == 1
    assert "❌ 无法解析JSON文件" in result.output


def test_encode_text_not_representable_in_configured_encoding(runner, tmp_path):
    conf = tmp_path / "b64.toml"
    conf.write_text('encoding = "ascii"\n', encoding="utf-8")
    result = runner.invoke(cli, ["--conf", str(conf), "encode", "héllo"])
    assert result.exit_code == 1
    assert "❌" in result.output
    assert "ascii" in result.output


def test_commands_log_start_and_finish(runner, tmp_path):
    log_path = tmp_path / "b64.log"
    conf = tmp_path / "b64.toml"
    conf.write_text(
        f'[log_config]\nlevel = "info"\nlog_path = "{log_path.as_posix()}"\n',
        encoding="utf-8",
    )
    doc = _write_json(tmp_path / "doc.json", {"content": "aGVsbG8="})

    assert runner.invoke(cli, ["--conf", str(conf), "encode", "hello"]).exit_code == 0
    assert runner.invoke(cli, ["--conf", str(conf), "decode", "aGVsbG8="]).exit_code == 0
    assert runner.invoke(cli, ["--conf", str(conf), "dump-field", doc, "--field", "content"]).exit_code == 0

    log_text = log_path.read_text(encoding="utf-8")
    for line in ("开始编码明文", "编码完成", "开始解码", "解码完成", "开始校验字段", "字段校验完成"):
        assert line in log_text
