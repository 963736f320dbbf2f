"""
火山引擎方舟图片生成适配层
"""

from volc_imggen.core.imggen import (
    GenerationRequest,
    GenerationResult,
    InlineReferenceFile,
    UrlReferenceFile,
    VolcengineImageModel,
    create_volcengine,
    volcengine,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "InlineReferenceFile",
    "UrlReferenceFile",
    "VolcengineImageModel",
    "create_volcengine",
    "volcengine",
]
