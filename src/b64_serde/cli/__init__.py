"""命令行接口"""
import json
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from b64_serde.models.base64_bytes import Base64BytesAdapter
from b64_serde.models.cli_config import LOG_LEVELS, CliConfig
from b64_serde.utils.codec import Base64Codec
from b64_serde.utils.config_loader import load_cli_config
from b64_serde.utils.exceptions import ConfigValidationError, InvalidBase64Error
from b64_serde.utils.log_utils import get_logger, setup_logger

logger = get_logger()


@click.group()
@click.option("--conf", "-c", help="配置文件路径（TOML格式）")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), help="日志级别（覆盖配置文件）")
@click.pass_context
def cli(ctx: click.Context, conf: Optional[str] = None, log_level: Optional[str] = None):
    """b64-serde CLI - 可选字节字段Base64编解码工具"""
    try:
        config = load_cli_config(Path(conf)) if conf else CliConfig()
    except (FileNotFoundError, ConfigValidationError) as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    log_config = config.log_config
    setup_logger(
        log_path=log_config.log_path,
        level=(log_level or log_config.level).upper(),
        rotation=log_config.rotation,
        retention=log_config.retention,
    )
    ctx.obj = config


@cli.command("encode")
@click.argument("plaintext", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True, dir_okay=False), help="待编码的文件")
@click.pass_obj
def encode(config: CliConfig, plaintext: Optional[str] = None, file_path: Optional[str] = None):
    """对明文或文件内容进行Base64编码"""
    if (plaintext is None) == (file_path is None):
        click.echo("❌ 需要且只能指定 PLAINTEXT 或 --file 其中之一", err=True)
        sys.exit(1)

    if file_path:
        logger.info(f"开始编码文件：{file_path}")
        data = Path(file_path).read_bytes()
    else:
        logger.info(f"开始编码明文（编码：{config.encoding}）")
        try:
            data = plaintext.encode(config.encoding)
        except UnicodeEncodeError as e:
            click.echo(f"❌ 明文无法使用 {config.encoding} 编码：{e}", err=True)
            logger.error(f"明文编码失败：{e}")
            sys.exit(1)
    click.echo(Base64Codec.encode(data))
    logger.info(f"编码完成：{len(data)} 字节")


@cli.command("decode")
@click.argument("encoded_str")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="解码结果写入的文件")
@click.pass_obj
def decode(config: CliConfig, encoded_str: str, output: Optional[str] = None):
    """对标准Base64编码串进行严格解码"""
    logger.info(f"开始解码：{len(encoded_str)} 个字符")
    try:
        data = Base64Codec.decode(encoded_str)
    except InvalidBase64Error as e:
        click.echo(f"❌ 解码失败：{e.reason}", err=True)
        logger.error(f"解码失败：{e.reason}")
        sys.exit(1)

    if output:
        Path(output).write_bytes(data)
        click.echo(f"✅ 已写入 {len(data)} 字节：{output}")
    else:
        click.echo(data.decode(config.encoding, errors="replace"))
    logger.info(f"解码完成：{len(data)} 字节")


@cli.command("dump-field")
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--field", "-f", "field_name", required=True, help="JSON对象中的字段名")
def dump_field(json_file: str, field_name: str):
    """校验JSON文档中的Base64字段并输出解码后的字节数"""
    logger.info(f"开始校验字段：{json_file} -> {field_name}")
    try:
        with open(json_file, "r", encoding="utf-8") as f:
            document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(f"❌ 无法解析JSON文件：{e}", err=True)
        logger.error(f"JSON文件解析失败（{json_file}）：{e}")
        sys.exit(1)

    if not isinstance(document, dict) or field_name not in document:
        click.echo(f"❌ 字段不存在：{field_name}", err=True)
        sys.exit(1)

    try:
        data = Base64BytesAdapter.validate_python(document[field_name])
    except ValidationError as e:
        for error in e.errors():
            click.echo(f"❌ 字段: {field_name}", err=True)
            click.echo(f"   类型: {error['type']}", err=True)
            click.echo(f"   错误: {error['msg']}", err=True)
        logger.error(f"字段校验失败：{field_name}")
        sys.exit(1)

    if data is None:
        click.echo("null")
    else:
        click.echo(f"{len(data)} bytes")
    logger.info(f"字段校验完成：{field_name}")


if __name__ == "__main__":
    cli()
