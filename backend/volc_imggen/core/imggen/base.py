"""
图片生成模型基类
定义所有图片生成模型的统一接口
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List

from .models import GenerationRequest, GenerationResult, ReferenceFile


class BaseImageModel(ABC):
    """图片生成模型基类

    每个提供商实现一个子类，对外只暴露 generate 和 max_images_per_call。
    """

    specification_version = "v3"

    @property
    @abstractmethod
    def provider(self) -> str:
        """提供商名称"""
        ...

    @property
    @abstractmethod
    def model_id(self) -> str:
        """模型ID"""
        ...

    @property
    @abstractmethod
    def max_images_per_call(self) -> int:
        """单次调用可请求的最大图片数"""
        ...

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        生成图片

        Args:
            request: 通用图片生成请求

        Returns:
            GenerationResult: 生成结果
        """
        ...

    async def generate_image(
        self,
        prompt: str,
        files: Optional[List[ReferenceFile]] = None,
        size: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
        seed: Optional[int] = None,
        provider_options: Optional[Dict[str, Dict[str, Any]]] = None,
        headers: Optional[Dict[str, Optional[str]]] = None,
        abort_signal: Optional[asyncio.Event] = None,
    ) -> GenerationResult:
        """以关键字参数形式调用 generate"""
        return await self.generate(GenerationRequest(
            prompt=prompt,
            files=files,
            size=size,
            aspect_ratio=aspect_ratio,
            seed=seed,
            provider_options=provider_options or {},
            headers=headers,
            abort_signal=abort_signal,
        ))
