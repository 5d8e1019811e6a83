"""b64_serde - 可选字节字段的Base64序列化"""
from b64_serde.models.base64_bytes import Base64Bytes, Base64BytesAdapter
from b64_serde.utils.codec import Base64Codec
from b64_serde.utils.exceptions import Base64DecodeError, InvalidBase64Error, UnexpectedNodeTypeError

__all__ = [
    "Base64Bytes",
    "Base64BytesAdapter",
    "Base64Codec",
    "Base64DecodeError",
    "InvalidBase64Error",
    "UnexpectedNodeTypeError",
]
