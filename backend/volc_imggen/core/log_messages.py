"""
日志消息模板模块
统一管理图片生成相关的日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 图片生成相关 ====================
    IMAGE_GENERATE_START = "开始调用图片生成接口: {model_id}"
    IMAGE_GENERATE_SUCCESS = "图片生成成功: {model_id}"
    IMAGE_UNSUPPORTED_FEATURE = "忽略不支持的参数: {feature}"

    # ==================== HTTP调用相关 ====================
    API_REQUEST_START = "发送API请求: {url}"
    API_REQUEST_ABORTED = "API请求已被取消: {url}"
    API_REQUEST_FAILED = "API请求失败: {url}"
    API_RESPONSE_INVALID = "API响应格式错误: {url}"

    # ==================== Provider注册相关 ====================
    PROVIDER_REGISTERED = "注册图片生成提供商: {provider_name}"
    PROVIDER_OVERRIDDEN = "提供商已存在，将被覆盖: {provider_name}"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
