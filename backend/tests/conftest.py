"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures
"""

from typing import Callable, Dict, Optional

import httpx
import pytest

from volc_imggen.core.imggen import VolcengineImageConfig, VolcengineImageModel
from tests.utils import TEST_BASE_URL, TEST_MODEL_ID, MockTransportBuilder, build_image_payload


@pytest.fixture
def transport_builder() -> MockTransportBuilder:
    """请求记录器"""
    return MockTransportBuilder()


@pytest.fixture
def make_model() -> Callable[..., VolcengineImageModel]:
    """创建使用指定传输层的图片模型"""

    def _make(
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Callable[[], Dict[str, Optional[str]]]] = None,
        model_id: str = TEST_MODEL_ID,
        base_url: str = TEST_BASE_URL,
    ) -> VolcengineImageModel:
        return VolcengineImageModel(
            model_id,
            VolcengineImageConfig(
                provider="volcengine.image",
                base_url=base_url,
                headers=headers or (lambda: {"Authorization": "Bearer test-api-key"}),
                transport=transport,
            ),
        )

    return _make


@pytest.fixture
def image_payload():
    """默认的成功响应体"""
    return build_image_payload()


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "imggen: 图片生成模型测试")
    config.addinivalue_line("markers", "data_url: 参考图片转换测试")
    config.addinivalue_line("markers", "http: HTTP工具测试")
    config.addinivalue_line("markers", "provider: 提供商与注册测试")
    config.addinivalue_line("markers", "config: 配置测试")
    config.addinivalue_line("markers", "logging: 日志测试")
    config.addinivalue_line("markers", "imports: 模块导入测试")
