"""
测试工具包
提供统一的测试工具和辅助函数
"""

from .mock_utils import TEST_BASE_URL, TEST_MODEL_ID, MockTransportBuilder, build_image_payload

__all__ = [
    'TEST_BASE_URL',
    'TEST_MODEL_ID',
    'MockTransportBuilder',
    'build_image_payload',
]
