"""
图片生成模块
提供统一的图片生成接口和火山引擎方舟实现
"""

# 核心类
from .base import BaseImageModel
from .models import (
    GenerationRequest,
    GenerationResult,
    GenerationWarning,
    ImageUsage,
    InlineReferenceFile,
    ReferenceFile,
    ResponseMetadata,
    UrlReferenceFile,
)
from .exceptions import (
    APICallError,
    ImageGenerationError,
    JSONParseError,
    LoadAPIKeyError,
    NoImageGeneratedError,
    ProviderNotFoundError,
    RequestAbortedError,
    TypeValidationError,
)
from .factory import ImageModelFactory

# 注册功能
from .registry import register_all_providers, register_provider

# 提供商
from .providers import (
    VolcengineImageConfig,
    VolcengineImageModel,
    VolcengineProvider,
    convert_file_to_data_url,
    create_volcengine,
    volcengine,
)

__all__ = [
    # 核心类
    "BaseImageModel",
    "GenerationRequest",
    "GenerationResult",
    "GenerationWarning",
    "ImageUsage",
    "InlineReferenceFile",
    "ReferenceFile",
    "ResponseMetadata",
    "UrlReferenceFile",
    "ImageModelFactory",
    # 异常
    "APICallError",
    "ImageGenerationError",
    "JSONParseError",
    "LoadAPIKeyError",
    "NoImageGeneratedError",
    "ProviderNotFoundError",
    "RequestAbortedError",
    "TypeValidationError",
    # 注册功能
    "register_all_providers",
    "register_provider",
    # 提供商
    "VolcengineImageConfig",
    "VolcengineImageModel",
    "VolcengineProvider",
    "convert_file_to_data_url",
    "create_volcengine",
    "volcengine",
]
