"""
图片生成数据模型
定义通用图片生成请求与结果的数据结构
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, List, Literal, Union


@dataclass(frozen=True)
class UrlReferenceFile:
    """远程URL形式的参考图片"""
    url: str
    kind: Literal["url"] = field(default="url", init=False)


@dataclass(frozen=True)
class InlineReferenceFile:
    """内联形式的参考图片

    Attributes:
        data: base64编码字符串或原始字节
        media_type: 媒体类型，如 "image/png"
    """
    data: Union[str, bytes]
    media_type: str
    kind: Literal["file"] = field(default="file", init=False)


ReferenceFile = Union[UrlReferenceFile, InlineReferenceFile]


@dataclass
class GenerationRequest:
    """通用图片生成请求

    Attributes:
        prompt: 图片描述提示词
        files: 参考图片列表（图生图）
        size: 图片尺寸，如 "2048x2048"
        aspect_ratio: 宽高比，如 "16:9"
        seed: 随机种子
        provider_options: 按提供商分组的特定参数，如 {"volcengine": {...}}
        headers: 本次调用附加的请求头
        abort_signal: 取消信号，set() 后中止进行中的请求
    """
    prompt: str
    files: Optional[List[ReferenceFile]] = None
    size: Optional[str] = None
    aspect_ratio: Optional[str] = None
    seed: Optional[int] = None
    provider_options: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    headers: Optional[Dict[str, Optional[str]]] = None
    abort_signal: Optional[asyncio.Event] = None


@dataclass(frozen=True)
class GenerationWarning:
    """非致命警告：请求的功能被接受但被忽略"""
    type: Literal["unsupported", "other"]
    feature: Optional[str] = None
    details: Optional[str] = None

    @classmethod
    def unsupported(cls, feature: str, details: Optional[str] = None) -> "GenerationWarning":
        return cls(type="unsupported", feature=feature, details=details)


@dataclass
class ResponseMetadata:
    """响应元数据"""
    timestamp: datetime
    model_id: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class ImageUsage:
    """Token用量，input_tokens 服务端不返回，始终为None"""
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


@dataclass
class GenerationResult:
    """图片生成结果

    Attributes:
        images: base64图片列表，顺序与服务端返回一致
        warnings: 警告列表
        response: 响应元数据
        usage: Token用量，服务端未返回时为None
    """
    images: List[str]
    warnings: List[GenerationWarning]
    response: ResponseMetadata
    usage: Optional[ImageUsage] = None
