"""
HTTP调用工具
封装JSON请求发送、请求头合并、响应解析与错误响应转换
"""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from volc_imggen.core.log_messages import LogMessages
from volc_imggen.core.log_utils import get_logger
from .exceptions import APICallError, JSONParseError, RequestAbortedError, TypeValidationError
from .schemas import VolcengineErrorResponse

logger = get_logger(__name__)


@dataclass
class ApiResponse:
    """成功响应的解析结果

    Attributes:
        value: 校验后的响应模型
        raw_value: 原始JSON数据
        response_headers: 响应头（键为小写）
    """
    value: Any
    raw_value: Any
    response_headers: Dict[str, str]


SuccessfulResponseHandler = Callable[..., ApiResponse]
FailedResponseHandler = Callable[..., APICallError]


def combine_headers(*headers: Optional[Dict[str, Optional[str]]]) -> Dict[str, Optional[str]]:
    """
    合并多组请求头，后面的同名键覆盖前面的

    请求头名称不区分大小写，被覆盖时保留后者的写法。值为None的条目在合并时保留，
    由 remove_none_entries 在发送前移除。

    Args:
        *headers: 请求头字典，None 会被跳过

    Returns:
        合并后的请求头
    """
    combined: Dict[str, Optional[str]] = {}
    key_by_lower: Dict[str, str] = {}
    for item in headers:
        if not item:
            continue
        for key, value in item.items():
            previous_key = key_by_lower.pop(key.lower(), None)
            if previous_key is not None:
                del combined[previous_key]
            combined[key] = value
            key_by_lower[key.lower()] = key
    return combined


def remove_none_entries(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    """去除值为None的条目"""
    return {key: value for key, value in values.items() if value is not None}


def extract_response_headers(response: httpx.Response) -> Dict[str, str]:
    """提取响应头，httpx 返回的键均为小写，同名多值以逗号拼接"""
    return dict(response.headers)


def _load_json(text: str) -> Any:
    """解析JSON文本，失败时抛出 JSONParseError"""
    try:
        return json.loads(text)
    except ValueError as e:
        raise JSONParseError(text, cause=e) from e


def parse_json(text: str, schema: Type[BaseModel]) -> Any:
    """
    解析并校验JSON文本

    Raises:
        JSONParseError: 文本不是合法JSON
        TypeValidationError: 数据不符合schema
    """
    return validate_types(_load_json(text), schema)


def validate_types(value: Any, schema: Type[BaseModel]) -> BaseModel:
    """用pydantic模型校验数据"""
    try:
        return schema.model_validate(value)
    except ValidationError as e:
        raise TypeValidationError(value, cause=e) from e


def default_is_retryable(status_code: int) -> bool:
    """408/409/429 以及 5xx 视为可重试"""
    return status_code in (408, 409, 429) or status_code >= 500


def create_json_response_handler(schema: Type[BaseModel]) -> SuccessfulResponseHandler:
    """
    创建成功响应处理器

    Args:
        schema: 响应体的pydantic模型

    Returns:
        处理器，返回 ApiResponse
    """

    def handler(url: str, request_body_values: Any, response: httpx.Response) -> ApiResponse:
        try:
            raw_value = _load_json(response.text)
        except JSONParseError:
            logger.debug(LogMessages.API_RESPONSE_INVALID, url=url)
            raise

        return ApiResponse(
            value=validate_types(raw_value, schema),
            raw_value=raw_value,
            response_headers=extract_response_headers(response),
        )

    return handler


def create_json_error_response_handler(
    error_schema: Type[BaseModel],
    error_to_message: Callable[[Any], str],
    is_retryable: Optional[Callable[[httpx.Response, Any], bool]] = None,
) -> FailedResponseHandler:
    """
    创建错误响应处理器

    响应体能按 error_schema 解析时，用 error_to_message 生成错误消息；
    否则退回到HTTP状态描述。

    Args:
        error_schema: 错误响应体的pydantic模型
        error_to_message: 从解析结果提取错误消息
        is_retryable: 自定义的可重试判断（可选）

    Returns:
        处理器，返回 APICallError（由调用方抛出）
    """

    def handler(url: str, request_body_values: Any, response: httpx.Response) -> APICallError:
        response_body = response.text
        response_headers = extract_response_headers(response)
        fallback_message = response.reason_phrase or f"HTTP {response.status_code}"

        if not response_body.strip():
            return APICallError(
                message=fallback_message,
                url=url,
                request_body_values=request_body_values,
                status_code=response.status_code,
                response_headers=response_headers,
                response_body=response_body,
                is_retryable=default_is_retryable(response.status_code),
            )

        try:
            parsed = parse_json(response_body, error_schema)
        except (JSONParseError, TypeValidationError):
            return APICallError(
                message=fallback_message,
                url=url,
                request_body_values=request_body_values,
                status_code=response.status_code,
                response_headers=response_headers,
                response_body=response_body,
                is_retryable=default_is_retryable(response.status_code),
            )

        if is_retryable is not None:
            retryable = is_retryable(response, parsed)
        else:
            retryable = default_is_retryable(response.status_code)

        return APICallError(
            message=error_to_message(parsed),
            url=url,
            request_body_values=request_body_values,
            status_code=response.status_code,
            response_headers=response_headers,
            response_body=response_body,
            is_retryable=retryable,
            data=parsed,
        )

    return handler


volcengine_failed_response_handler = create_json_error_response_handler(
    error_schema=VolcengineErrorResponse,
    error_to_message=lambda data: data.error.message,
)


async def _send_with_abort(
    client: httpx.AsyncClient,
    request: httpx.Request,
    abort_signal: Optional[asyncio.Event],
    url: str,
) -> httpx.Response:
    """发送请求，abort_signal 被 set 时取消进行中的请求"""
    if abort_signal is None:
        return await client.send(request)

    if abort_signal.is_set():
        raise RequestAbortedError(url)

    send_task = asyncio.ensure_future(client.send(request))
    abort_task = asyncio.ensure_future(abort_signal.wait())
    try:
        done, _ = await asyncio.wait(
            {send_task, abort_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
    except asyncio.CancelledError:
        send_task.cancel()
        raise
    finally:
        abort_task.cancel()

    if send_task in done:
        return send_task.result()

    send_task.cancel()
    try:
        await send_task
    except asyncio.CancelledError:
        pass
    logger.debug(LogMessages.API_REQUEST_ABORTED, url=url)
    raise RequestAbortedError(url)


async def post_json_to_api(
    url: str,
    headers: Dict[str, Optional[str]],
    body: Dict[str, Any],
    failed_response_handler: FailedResponseHandler,
    successful_response_handler: SuccessfulResponseHandler,
    abort_signal: Optional[asyncio.Event] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> ApiResponse:
    """
    以JSON格式POST请求体并解析响应

    Args:
        url: 请求地址
        headers: 请求头，值为None的条目不会发送
        body: 请求体
        failed_response_handler: 非2xx响应的处理器
        successful_response_handler: 2xx响应的处理器
        abort_signal: 取消信号
        transport: 自定义传输层，None时使用httpx默认实现
        timeout: 超时秒数，None表示不限制

    Returns:
        ApiResponse: 解析后的响应

    Raises:
        APICallError: 服务端返回非2xx状态码
        RequestAbortedError: 请求被取消信号中止
        httpx.RequestError: 网络层错误，原样抛出
    """
    request_headers = remove_none_entries(
        combine_headers(headers, {"Content-Type": "application/json"})
    )

    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        request = client.build_request(
            "POST",
            url,
            headers=request_headers,
            content=json.dumps(body).encode("utf-8"),
        )
        logger.debug(LogMessages.API_REQUEST_START, url=url, body_keys=list(body.keys()))
        response = await _send_with_abort(client, request, abort_signal, url)

    if not response.is_success:
        error = failed_response_handler(
            url=url,
            request_body_values=body,
            response=response,
        )
        logger.debug(LogMessages.API_REQUEST_FAILED, url=url, status_code=response.status_code)
        raise error

    return successful_response_handler(
        url=url,
        request_body_values=body,
        response=response,
    )
