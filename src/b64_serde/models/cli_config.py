"""CLI配置模型"""
import codecs
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LogConfig(BaseModel):
    """日志配置模型"""

    level: str = Field(default="WARNING", description="日志级别")
    log_path: Optional[Path] = Field(default=None, description="日志文件路径")
    rotation: str = Field(default="100 MB", description="日志轮转规则")
    retention: int = Field(default=7, description="日志保留天数")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """校验日志级别为Loguru支持的级别"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"不支持的日志级别：{v}，可选：{', '.join(LOG_LEVELS)}")
        return level


class CliConfig(BaseModel):
    """CLI核心配置模型"""

    # 日志配置
    log_config: LogConfig = Field(default_factory=LogConfig, description="Loguru日志配置")
    # encode TEXT 时使用的文本编码
    encoding: str = Field(default="utf-8", description="明文文本编码")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """校验文本编码名称可被Python识别"""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"未知的文本编码：{v}")
        return v
