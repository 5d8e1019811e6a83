"""自定义异常类"""


class Base64DecodeError(ValueError):
    """Base64字段解码失败异常基类"""
    pass


class InvalidBase64Error(Base64DecodeError):
    """文本内容不是合法的标准Base64编码（非法字符、填充错误、长度错误）"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"无效的Base64编码：{reason}")


class UnexpectedNodeTypeError(Base64DecodeError):
    """节点既不是字符串也不是null"""

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"期望字符串或null，实际类型为：{node_type}")


class ConfigValidationError(Exception):
    """配置验证失败异常"""
    pass
