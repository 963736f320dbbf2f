"""
图片生成异常定义
定义图片生成模块中使用的所有异常类型
"""

from typing import Any, Dict, Mapping, Optional


class ImageGenerationError(Exception):
    """
    图片生成基础异常

    所有图片生成相关异常的基类。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class APICallError(ImageGenerationError):
    """
    API调用错误

    服务端返回非2xx状态码时抛出，保留请求与响应的完整上下文。
    """

    def __init__(
        self,
        message: str,
        url: str,
        request_body_values: Any = None,
        status_code: Optional[int] = None,
        response_headers: Optional[Mapping[str, str]] = None,
        response_body: Optional[str] = None,
        is_retryable: bool = False,
        data: Any = None,
    ) -> None:
        super().__init__(
            message,
            code="API_CALL_ERROR",
            details={"url": url, "status_code": status_code},
        )
        self.url = url
        self.request_body_values = request_body_values
        self.status_code = status_code
        self.response_headers = dict(response_headers or {})
        self.response_body = response_body
        self.is_retryable = is_retryable
        self.data = data


class JSONParseError(ImageGenerationError):
    """响应体不是合法JSON"""

    def __init__(self, text: str, cause: Optional[Exception] = None) -> None:
        super().__init__(
            f"JSON解析失败: {cause}",
            code="JSON_PARSE_ERROR",
            details={"text": text[:200]},
        )
        self.text = text
        self.cause = cause


class TypeValidationError(ImageGenerationError):
    """响应体不符合预期的数据结构"""

    def __init__(self, value: Any, cause: Optional[Exception] = None) -> None:
        super().__init__(
            f"响应数据校验失败: {cause}",
            code="TYPE_VALIDATION_ERROR",
        )
        self.value = value
        self.cause = cause


class NoImageGeneratedError(ImageGenerationError):
    """响应中缺少base64图片数据"""

    def __init__(self, message: str = "No base64 image data in response", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="NO_IMAGE_GENERATED", details=details)


class RequestAbortedError(ImageGenerationError):
    """请求被取消信号中止"""

    def __init__(self, url: str) -> None:
        super().__init__("请求已被取消", code="REQUEST_ABORTED", details={"url": url})
        self.url = url


class LoadAPIKeyError(ImageGenerationError):
    """API密钥加载失败"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="LOAD_API_KEY_ERROR", details=details)


class ProviderNotFoundError(ImageGenerationError):
    """未注册的图片生成提供商"""

    def __init__(self, provider_name: str) -> None:
        super().__init__(
            f"不支持的提供商类型: {provider_name}",
            code="PROVIDER_NOT_FOUND",
            details={"provider_name": provider_name},
        )
        self.provider_name = provider_name


__all__ = [
    'ImageGenerationError',
    'APICallError',
    'JSONParseError',
    'TypeValidationError',
    'NoImageGeneratedError',
    'RequestAbortedError',
    'LoadAPIKeyError',
    'ProviderNotFoundError',
]
