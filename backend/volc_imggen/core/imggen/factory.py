"""
图片生成模型工厂
负责按提供商名称创建图片模型实例
"""

from typing import Any, Callable, Dict

from volc_imggen.core.log_messages import LogMessages
from volc_imggen.core.log_utils import get_logger
from .base import BaseImageModel
from .exceptions import ProviderNotFoundError

logger = get_logger(__name__)

# 提供商创建函数：接收提供商参数，返回带 image_model(model_id) 的提供商对象
ProviderCreator = Callable[..., Any]


class ImageModelFactory:
    """图片生成模型工厂"""

    _providers: Dict[str, ProviderCreator] = {}

    @classmethod
    def register_provider(cls, provider_name: str, creator: ProviderCreator):
        """
        注册提供商

        Args:
            provider_name: 提供商名称
            creator: 提供商创建函数
        """
        if provider_name in cls._providers:
            logger.warning(LogMessages.PROVIDER_OVERRIDDEN, provider_name=provider_name)

        cls._providers[provider_name] = creator
        logger.info(LogMessages.PROVIDER_REGISTERED, provider_name=provider_name)

    @classmethod
    def create_model(cls, provider_name: str, model_id: str, **options: Any) -> BaseImageModel:
        """
        创建图片模型实例

        Args:
            provider_name: 提供商名称
            model_id: 模型ID
            **options: 传给提供商创建函数的参数（api_key、base_url等）

        Returns:
            BaseImageModel: 图片模型实例

        Raises:
            ProviderNotFoundError: 提供商未注册
        """
        if provider_name not in cls._providers:
            raise ProviderNotFoundError(provider_name)

        provider = cls._providers[provider_name](**options)
        return provider.image_model(model_id)

    @classmethod
    def get_available_providers(cls) -> Dict[str, ProviderCreator]:
        """获取所有已注册的提供商"""
        return cls._providers.copy()

    @classmethod
    def is_provider_supported(cls, provider_name: str) -> bool:
        """检查是否支持指定的提供商"""
        return provider_name in cls._providers

    @classmethod
    def unregister_provider(cls, provider_name: str) -> None:
        """移除已注册的提供商"""
        cls._providers.pop(provider_name, None)
