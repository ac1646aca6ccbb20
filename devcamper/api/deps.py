"""路由公共依赖"""
from fastapi import Request


def parsed_body(schema):
    """用模式校验经过管道清洗的请求体（request.state.body）"""

    async def dependency(request: Request):
        body = getattr(request.state, "body", None)
        return schema.model_validate(body if body is not None else {})

    return dependency


def query_params(request: Request) -> dict:
    """管道处理后的查询参数（HPP 之后每个键只剩一个值）"""
    return dict(request.query_params)


def get_settings(request: Request):
    return request.app.state.settings
