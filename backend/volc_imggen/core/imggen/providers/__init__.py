"""
图片生成提供商实现
"""

from .volcengine_ark import (
    VOLCENGINE_IMAGE_MODEL_IDS,
    VolcengineImageConfig,
    VolcengineImageModel,
    convert_file_to_data_url,
)
from .volcengine import VolcengineProvider, create_volcengine, volcengine

__all__ = [
    "VOLCENGINE_IMAGE_MODEL_IDS",
    "VolcengineImageConfig",
    "VolcengineImageModel",
    "convert_file_to_data_url",
    "VolcengineProvider",
    "create_volcengine",
    "volcengine",
]
