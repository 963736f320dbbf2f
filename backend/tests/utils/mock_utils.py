"""
测试专用的 mock 工具和辅助函数
基于 httpx.MockTransport 模拟方舟接口，供所有测试使用
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

import httpx

TEST_BASE_URL = "https://ark.test.local/api/v3"
TEST_MODEL_ID = "doubao-seedream-4-5-251128"


def build_image_payload(
    images: Optional[List[Optional[str]]] = None,
    model: Optional[str] = None,
    usage: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """构建方舟图片生成响应体，images 中的 None 表示该项缺少 b64_json"""
    images = images if images is not None else ["aW1hZ2UtMQ=="]
    data = []
    for image in images:
        item: Dict[str, Any] = {"size": "2048x2048"}
        if image is not None:
            item["b64_json"] = image
        data.append(item)

    payload: Dict[str, Any] = {"created": 1700000000, "data": data}
    if model is not None:
        payload["model"] = model
    if usage is not None:
        payload["usage"] = usage
    return payload


class MockTransportBuilder:
    """MockTransport构建器 - 记录发出的请求并返回预设响应"""

    def __init__(self):
        self.requests: List[httpx.Request] = []

    def _record(self, request: httpx.Request) -> None:
        self.requests.append(request)

    def json_response(
        self,
        payload: Any,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.MockTransport:
        """返回固定JSON响应"""

        def handler(request: httpx.Request) -> httpx.Response:
            self._record(request)
            return httpx.Response(status_code, json=payload, headers=headers)

        return httpx.MockTransport(handler)

    def text_response(
        self,
        text: str,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.MockTransport:
        """返回固定文本响应"""

        def handler(request: httpx.Request) -> httpx.Response:
            self._record(request)
            return httpx.Response(status_code, text=text, headers=headers)

        return httpx.MockTransport(handler)

    def raising(self, error_factory: Callable[[httpx.Request], Exception]) -> httpx.MockTransport:
        """模拟网络层异常"""

        def handler(request: httpx.Request) -> httpx.Response:
            self._record(request)
            raise error_factory(request)

        return httpx.MockTransport(handler)

    def custom(
        self,
        handler: Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]],
    ) -> httpx.MockTransport:
        """使用自定义处理函数（可为协程函数）"""

        def recording_handler(request: httpx.Request):
            self._record(request)
            return handler(request)

        return httpx.MockTransport(recording_handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "没有记录到任何请求"
        return self.requests[-1]

    @property
    def last_json(self) -> Dict[str, Any]:
        """最近一次请求的JSON请求体"""
        return json.loads(self.last_request.content)
