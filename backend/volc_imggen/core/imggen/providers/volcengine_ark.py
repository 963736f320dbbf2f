"""
火山引擎方舟图片生成模型
将通用图片生成请求转换为方舟 /images/generations 接口的请求体，并解析响应
"""

import base64
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx

from volc_imggen.core.log_messages import LogMessages
from volc_imggen.core.log_utils import get_logger
from volc_imggen.core.imggen.base import BaseImageModel
from volc_imggen.core.imggen.exceptions import NoImageGeneratedError
from volc_imggen.core.imggen.http import (
    combine_headers,
    create_json_response_handler,
    post_json_to_api,
    volcengine_failed_response_handler,
)
from volc_imggen.core.imggen.models import (
    GenerationRequest,
    GenerationResult,
    GenerationWarning,
    ImageUsage,
    ReferenceFile,
    ResponseMetadata,
)
from volc_imggen.core.imggen.schemas import VolcengineImageResponse

logger = get_logger(__name__)

# 已知模型ID，其他字符串原样透传
VOLCENGINE_IMAGE_MODEL_IDS = [
    "doubao-seedream-4-5-251128",
    "doubao-seedream-4-0-250828",
]

PROVIDER_OPTIONS_KEY = "volcengine"


@dataclass
class VolcengineImageConfig:
    """图片模型配置

    Attributes:
        provider: 提供商名称
        base_url: API基础URL
        headers: 每次请求时调用，返回认证等请求头
        transport: 自定义httpx传输层，None时使用默认网络实现
        timeout: 默认客户端的超时秒数，None表示不限制
    """
    provider: str
    base_url: str
    headers: Callable[[], Dict[str, Optional[str]]]
    transport: Optional[httpx.AsyncBaseTransport] = None
    timeout: Optional[float] = None


def convert_file_to_data_url(file: ReferenceFile) -> str:
    """
    将参考图片转换为方舟接受的字符串

    URL原样返回；内联数据转换为 data:<mediaType>;base64,<payload>

    Args:
        file: 参考图片

    Returns:
        str: URL或data URL
    """
    if file.kind == "url":
        return file.url

    if file.kind == "file":
        if isinstance(file.data, (bytes, bytearray, memoryview)):
            payload = base64.b64encode(bytes(file.data)).decode("ascii")
        else:
            payload = file.data
        return f"data:{file.media_type};base64,{payload}"

    raise TypeError(f"不支持的参考图片类型: {file.kind!r}")


class VolcengineImageModel(BaseImageModel):
    """火山引擎方舟图片生成模型"""

    DEFAULT_SIZE = "2048x2048"
    # 始终请求base64数据
    RESPONSE_FORMAT = "b64_json"

    def __init__(self, model_id: str, config: VolcengineImageConfig):
        self._model_id = model_id
        self.config = config

    @property
    def provider(self) -> str:
        return self.config.provider

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def max_images_per_call(self) -> int:
        return 1

    def _collect_warnings(self, request: GenerationRequest) -> List[GenerationWarning]:
        """不支持的参数降级为警告"""
        warnings: List[GenerationWarning] = []

        if request.aspect_ratio is not None:
            warnings.append(GenerationWarning.unsupported("aspectRatio"))

        if request.seed is not None:
            warnings.append(GenerationWarning.unsupported("seed"))

        return warnings

    def _build_request_body(self, request: GenerationRequest) -> Dict[str, Any]:
        """构建方舟请求体"""
        volcengine_options = dict(request.provider_options.get(PROVIDER_OPTIONS_KEY) or {})
        # 调用方传入的 response_format 会被忽略
        volcengine_options.pop("response_format", None)

        body: Dict[str, Any] = {
            "model": self.model_id,
            "prompt": request.prompt,
            "size": request.size if request.size is not None else self.DEFAULT_SIZE,
            **volcengine_options,
            "response_format": self.RESPONSE_FORMAT,
        }

        if request.files:
            image_urls = [convert_file_to_data_url(file) for file in request.files]
            if len(image_urls) == 1:
                body["image"] = image_urls[0]
            else:
                body["image"] = image_urls

        return body

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        调用方舟接口生成图片

        Args:
            request: 通用图片生成请求

        Returns:
            GenerationResult: 生成结果

        Raises:
            APICallError: 服务端返回非2xx状态码
            JSONParseError: 响应不是合法JSON
            TypeValidationError: 响应结构不符合预期
            NoImageGeneratedError: 某个结果项缺少 b64_json
        """
        warnings = self._collect_warnings(request)
        for warning in warnings:
            logger.debug(LogMessages.IMAGE_UNSUPPORTED_FEATURE, feature=warning.feature)

        body = self._build_request_body(request)

        logger.debug(
            LogMessages.IMAGE_GENERATE_START,
            model_id=self.model_id,
            prompt_length=len(request.prompt),
            file_count=len(request.files or []),
        )

        api_response = await post_json_to_api(
            url=f"{self.config.base_url}/images/generations",
            headers=combine_headers(self.config.headers(), request.headers),
            body=body,
            failed_response_handler=volcengine_failed_response_handler,
            successful_response_handler=create_json_response_handler(VolcengineImageResponse),
            abort_signal=request.abort_signal,
            transport=self.config.transport,
            timeout=self.config.timeout,
        )
        response: VolcengineImageResponse = api_response.value

        images: List[str] = []
        for index, item in enumerate(response.data):
            if not item.b64_json:
                raise NoImageGeneratedError(details={"index": index})
            images.append(item.b64_json)

        usage = None
        if response.usage is not None:
            usage = ImageUsage(
                input_tokens=None,
                output_tokens=response.usage.output_tokens,
                total_tokens=response.usage.total_tokens,
            )

        logger.debug(LogMessages.IMAGE_GENERATE_SUCCESS, model_id=self.model_id, image_count=len(images))

        return GenerationResult(
            images=images,
            warnings=warnings,
            response=ResponseMetadata(
                timestamp=datetime.now(timezone.utc),
                model_id=response.model if response.model is not None else self.model_id,
                headers=api_response.response_headers,
            ),
            usage=usage,
        )
