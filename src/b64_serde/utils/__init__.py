"""工具模块导出"""
from b64_serde.utils.codec import Base64Codec
from b64_serde.utils.exceptions import (
    Base64DecodeError,
    ConfigValidationError,
    InvalidBase64Error,
    UnexpectedNodeTypeError,
)

__all__ = [
    "Base64Codec",
    "Base64DecodeError",
    "InvalidBase64Error",
    "UnexpectedNodeTypeError",
    "ConfigValidationError",
]
