"""
配置工具模块
处理配置路径计算、API密钥加载等工具方法
"""

import os
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_project_root() -> Path:
    """获取项目根目录路径"""
    return Path(__file__).parent.parent.parent.parent


def get_workspace_path(sub_path: str = "") -> Path:
    """获取workspace目录路径"""
    workspace_dir = get_project_root() / "workspace"
    if sub_path:
        return workspace_dir / sub_path
    return workspace_dir


def get_config_path(sub_path: str = "") -> Path:
    """获取config目录路径"""
    config_dir = get_project_root() / "config"
    if sub_path:
        return config_dir / sub_path
    return config_dir


def without_trailing_slash(url: Optional[str]) -> Optional[str]:
    """去除URL末尾的斜杠"""
    if url is None:
        return None
    return url.rstrip("/")


def load_api_key(
    api_key: Optional[str],
    environment_variable_name: str,
    description: str,
    fallback: Optional[str] = None,
) -> str:
    """
    加载API密钥

    优先使用显式传入的密钥，其次读取环境变量，最后使用配置中的兜底值。

    Args:
        api_key: 显式传入的API密钥
        environment_variable_name: 环境变量名称
        description: 服务描述，用于错误消息
        fallback: 配置文件中的兜底密钥

    Returns:
        str: API密钥

    Raises:
        LoadAPIKeyError: 没有找到可用的API密钥
    """
    # 延迟导入，避免与imggen模块循环依赖
    from volc_imggen.core.imggen.exceptions import LoadAPIKeyError

    if api_key is not None:
        if not isinstance(api_key, str):
            raise LoadAPIKeyError(f"{description} API密钥必须是字符串")
        return api_key

    env_value = os.environ.get(environment_variable_name)
    if env_value:
        return env_value

    if fallback:
        return fallback

    logger.warning(f"缺少API密钥环境变量: {environment_variable_name}")
    raise LoadAPIKeyError(
        f"{description} API密钥缺失，请通过 api_key 参数或 "
        f"{environment_variable_name} 环境变量传入",
        details={"environment_variable": environment_variable_name},
    )
