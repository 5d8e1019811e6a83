import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # CLI调用会绑定CliRunner的临时stderr，测试结束后恢复为库默认状态
    logger.remove()
    logger.disable("b64_serde")
