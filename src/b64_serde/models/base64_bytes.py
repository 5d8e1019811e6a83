"""Base64编码的可选字节字段类型

在pydantic模型中声明 ``content: Base64Bytes = None`` 即可：
- 序列化时字节写为标准Base64字符串，None写为null
- 反序列化时严格解码Base64字符串，null还原为None
- 其他节点类型（数字、布尔、数组、对象）校验失败，错误位置由pydantic给出字段路径

注意：Python侧传入的 bytes/bytearray 视为已解码的原始字节，原样保存，不做Base64解码。
例如 ``Base64BytesAdapter.validate_python(b"aGVsbG8=")`` 返回 ``b"aGVsbG8="`` 本身，
而 ``Base64Codec.decode(b"aGVsbG8=")`` 会因节点类型不符被拒绝。JSON输入不会产生bytes，不受影响。
"""
from typing import Annotated, Any, Optional

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, WithJsonSchema
from pydantic_core import PydanticCustomError

from b64_serde.utils.codec import Base64Codec
from b64_serde.utils.exceptions import InvalidBase64Error, UnexpectedNodeTypeError

BASE64_BYTES_JSON_SCHEMA = {
    "anyOf": [
        {"type": "string", "format": "base64", "contentEncoding": "base64"},
        {"type": "null"},
    ]
}


def _validate_base64_bytes(value: Any) -> Optional[bytes]:
    # Python侧直接构造模型时传入的字节视为已解码值
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return Base64Codec.decode(value)
    except InvalidBase64Error as e:
        raise PydanticCustomError(
            "invalid_base64",
            "Invalid base64 string: {reason}",
            {"reason": e.reason},
        )
    except UnexpectedNodeTypeError as e:
        raise PydanticCustomError(
            "unexpected_node_type",
            "Expected a base64 string or null, got {node_type}",
            {"node_type": e.node_type},
        )


Base64Bytes = Annotated[
    Optional[bytes],
    PlainValidator(_validate_base64_bytes),
    PlainSerializer(Base64Codec.encode, return_type=Optional[str]),
    WithJsonSchema(BASE64_BYTES_JSON_SCHEMA),
]

# 单个节点的编解码入口，无需定义模型
Base64BytesAdapter = TypeAdapter(Base64Bytes)
