"""
火山引擎方舟图片生成API的Pydantic校验模型
"""

from typing import Optional, List, Any, Union
from pydantic import BaseModel, ConfigDict, Field


class VolcengineImageData(BaseModel):
    """单张图片结果"""
    model_config = ConfigDict(extra="allow")

    b64_json: Optional[str] = Field(None, description="base64编码的图片数据")


class VolcengineImageUsage(BaseModel):
    """Token用量"""
    model_config = ConfigDict(extra="allow")

    output_tokens: int = Field(..., description="输出Token数")
    total_tokens: int = Field(..., description="总Token数")


class VolcengineImageResponse(BaseModel):
    """图片生成响应"""
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    model: Optional[str] = Field(None, description="服务端回显的模型ID")
    data: List[VolcengineImageData] = Field(..., description="图片结果列表")
    usage: Optional[VolcengineImageUsage] = Field(None, description="Token用量")


class VolcengineErrorDetail(BaseModel):
    """错误详情"""
    model_config = ConfigDict(extra="allow")

    message: str
    type: Optional[str] = None
    param: Optional[Any] = None
    code: Optional[Union[str, int]] = None


class VolcengineErrorResponse(BaseModel):
    """错误响应"""
    error: VolcengineErrorDetail
