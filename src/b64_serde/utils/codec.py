"""Base64 编解码工具模块，用于可选字节字段的序列化"""
import base64
from typing import Any, Optional, Union

from b64_serde.utils.exceptions import InvalidBase64Error, UnexpectedNodeTypeError
from b64_serde.utils.log_utils import get_logger

logger = get_logger()

BytesLike = Union[bytes, bytearray, memoryview]


class Base64Codec:
    """可选字节序列的标准Base64编解码工具类（RFC 4648 §4，带=填充）"""

    @staticmethod
    def encode(value: Optional[BytesLike]) -> Optional[str]:
        """
        将可选字节序列编码为Base64文本
        :param value: 原始字节，None表示缺省
        :return: 带填充的Base64字符串，缺省时返回None
        """
        if value is None:
            return None
        return base64.b64encode(bytes(value)).decode("ascii")

    @staticmethod
    def decode(node: Any) -> Optional[bytes]:
        """
        将文档节点严格解码为可选字节序列
        :param node: 文档节点（字符串或None）
        :return: 解码后的字节，节点为None时返回None
        """
        if node is None:
            return None
        if not isinstance(node, str):
            node_type = type(node).__name__
            logger.debug(f"拒绝非字符串节点：{node_type}")
            raise UnexpectedNodeTypeError(node_type)

        try:
            decoded = base64.b64decode(node, validate=True)
        except ValueError as e:
            # binascii.Error 与非ASCII字符串的 ValueError
            logger.debug(f"Base64解码失败：{e}")
            raise InvalidBase64Error(str(e)) from e

        # 填充后的多余数据、非零尾部比特都不是规范编码
        if base64.b64encode(decoded).decode("ascii") != node:
            reason = "Non-canonical base64 encoding"
            logger.debug(f"Base64解码失败：{reason}")
            raise InvalidBase64Error(reason)
        return decoded
