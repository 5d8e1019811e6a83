"""TOML配置加载器"""
from pathlib import Path
from typing import Any, Dict

import toml
from pydantic import ValidationError

from b64_serde.models.cli_config import CliConfig
from b64_serde.utils.exceptions import ConfigValidationError
from b64_serde.utils.log_utils import get_logger

logger = get_logger()

# 配置文件中可选的顶层表名
CONFIG_SECTION = "b64_serde"


def load_config(config_file: Path) -> Dict[str, Any]:
    """
    加载TOML配置文件
    :param config_file: 配置文件路径
    :return: 配置字典（存在 [b64_serde] 表时返回该表内容）
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"配置文件不存在: {config_file}")

    logger.info(f"加载配置: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        config = toml.load(f)

    if CONFIG_SECTION in config:
        return config[CONFIG_SECTION]
    return config


def load_cli_config(config_file: Path) -> CliConfig:
    """
    加载并校验CLI配置
    :param config_file: 配置文件路径
    :return: CLI配置对象
    """
    raw_config = load_config(config_file)
    try:
        return CliConfig(**raw_config)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ConfigValidationError(f"配置验证失败（{config_file}）：{details}") from e
