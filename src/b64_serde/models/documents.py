"""示例文档模型"""
from typing import List, Optional

from pydantic import BaseModel, Field

from b64_serde.models.base64_bytes import Base64Bytes


class BlobRecord(BaseModel):
    """单条字节记录"""
    # 原始字节内容，文档中为Base64字符串或null
    content: Base64Bytes = Field(default=None, description="Base64编码的字节内容")


class BlobDocument(BaseModel):
    """字节记录列表文档"""
    # 记录顺序在序列化前后保持不变
    descriptors: Optional[List[BlobRecord]] = Field(default=None, description="字节记录列表")
