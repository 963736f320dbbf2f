"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from volc_imggen.utils.config_utils import (
    get_workspace_path, get_config_path, without_trailing_slash
)


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_debug: bool = False

    # ==================== 火山引擎方舟配置 ====================
    ark_api_key: str = ""
    volcengine_base_url: str = "https://ark.cn-beijing.volces.com/api/v3"
    # None 表示不设置超时，由调用方通过取消信号控制
    volcengine_timeout: Optional[float] = None

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_dir: str = "log"
    log_file: str = ""
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 验证器 ====================
    @field_validator("volcengine_base_url")
    @classmethod
    def strip_base_url(cls, value: str) -> str:
        """清理base_url并校验协议前缀"""
        value = without_trailing_slash(value.strip())
        if not value.startswith(("http://", "https://")):
            raise ValueError("volcengine_base_url必须以 http:// 或 https:// 开头")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """日志级别统一为大写"""
        return value.strip().upper()

    # ==================== 计算属性 ====================
    @property
    def absolute_log_file(self) -> Optional[str]:
        """获取绝对日志文件路径，未配置日志文件时返回None"""
        if not self.log_file:
            return None
        return str(get_workspace_path(self.log_dir) / self.log_file)

    model_config = SettingsConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    # 环境变量文件加载由外部环境控制，这里只返回配置实例
    return Settings()


# 全局配置实例
settings = get_settings()
