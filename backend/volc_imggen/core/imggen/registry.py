"""
图片生成提供商注册
管理图片生成提供商的注册和查询
"""

from volc_imggen.core.log_utils import get_logger
from .factory import ImageModelFactory, ProviderCreator

logger = get_logger(__name__)


def register_all_providers():
    """注册所有图片生成提供商

    这个函数应该在应用启动时被调用一次
    """
    from .providers.volcengine import create_volcengine

    providers = [
        ("volcengine", create_volcengine),
    ]

    for provider_name, creator in providers:
        ImageModelFactory.register_provider(provider_name, creator)

    logger.info(
        "已注册所有图片生成提供商",
        operation="register_all_providers",
        provider_count=len(providers)
    )


def register_provider(provider_name: str, creator: ProviderCreator):
    """注册单个图片生成提供商

    Args:
        provider_name: 提供商名称
        creator: 提供商创建函数
    """
    ImageModelFactory.register_provider(provider_name, creator)
