"""模型模块导出"""
from b64_serde.models.base64_bytes import Base64Bytes, Base64BytesAdapter
from b64_serde.models.cli_config import CliConfig, LogConfig
from b64_serde.models.documents import BlobDocument, BlobRecord

__all__ = [
    "Base64Bytes",
    "Base64BytesAdapter",
    "BlobRecord",
    "BlobDocument",
    "CliConfig",
    "LogConfig",
]
