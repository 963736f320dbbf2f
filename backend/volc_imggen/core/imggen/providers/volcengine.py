"""
火山引擎方舟提供商
负责组装认证请求头与基础URL，并创建图片模型实例
"""

from typing import Dict, Optional

import httpx

from volc_imggen.core.config import settings
from volc_imggen.utils.config_utils import load_api_key, without_trailing_slash
from .volcengine_ark import VolcengineImageConfig, VolcengineImageModel


class VolcengineProvider:
    """火山引擎方舟提供商

    provider("doubao-seedream-4-5-251128") 等价于 provider.image_model(...)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = without_trailing_slash(base_url) or settings.volcengine_base_url
        self._api_key = api_key
        self._custom_headers = dict(headers or {})
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.volcengine_timeout

    def _get_headers(self) -> Dict[str, Optional[str]]:
        """每次请求时重新读取API密钥"""
        api_key = load_api_key(
            api_key=self._api_key,
            environment_variable_name="ARK_API_KEY",
            description="Volcengine",
            fallback=settings.ark_api_key,
        )
        return {
            "Authorization": f"Bearer {api_key}",
            **self._custom_headers,
        }

    def image_model(self, model_id: str) -> VolcengineImageModel:
        """
        创建图片生成模型

        Args:
            model_id: 模型ID，未知ID原样透传

        Returns:
            VolcengineImageModel: 图片模型实例
        """
        return VolcengineImageModel(
            model_id,
            VolcengineImageConfig(
                provider="volcengine.image",
                base_url=self.base_url,
                headers=self._get_headers,
                transport=self.transport,
                timeout=self.timeout,
            ),
        )

    image = image_model

    def __call__(self, model_id: str) -> VolcengineImageModel:
        return self.image_model(model_id)


def create_volcengine(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> VolcengineProvider:
    """
    创建火山引擎方舟提供商

    Args:
        api_key: API密钥，默认读取 ARK_API_KEY 环境变量
        base_url: API基础URL，默认使用配置中的 volcengine_base_url
        headers: 附加到每个请求的自定义请求头
        transport: 自定义httpx传输层
        timeout: 超时秒数

    Returns:
        VolcengineProvider: 提供商实例
    """
    return VolcengineProvider(
        api_key=api_key,
        base_url=base_url,
        headers=headers,
        transport=transport,
        timeout=timeout,
    )


# 默认提供商实例，API密钥在首次请求时才读取
volcengine = create_volcengine()
