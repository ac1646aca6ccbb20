"""列表查询辅助：字段选择、排序、过滤、分页"""
import re
from dataclasses import dataclass

from tortoise import fields as orm_fields

from devcamper.core.exceptions import BadRequestException

RESERVED_PARAMS = {"select", "sort", "page", "limit"}
FILTER_KEY = re.compile(r"^(\w+)(?:\[(gt|gte|lt|lte|in)\])?$")

DEFAULT_LIMIT = 25
MAX_LIMIT = 100
# 64 位有符号整数上限，超出后数据库无法绑定
MAX_INTEGER = 2 ** 63 - 1


@dataclass
class PageResult:
    items: list
    total: int
    page: int
    limit: int
    selected: bool = False


def _filterable_fields(model, hidden=()) -> dict:
    meta = model._meta
    result = {}
    for name, field in meta.fields_map.items():
        if name in meta.fetch_fields or name in hidden or isinstance(field, orm_fields.JSONField):
            continue
        result[name] = field
    # 外键按名称过滤时映射到 *_id 列
    for name in meta.fk_fields:
        result[name] = meta.fields_map[f"{name}_id"]
    return result


def _coerce(field, value: str):
    if isinstance(field, orm_fields.BooleanField):
        lowered = value.lower()
        if lowered not in ("true", "false", "1", "0"):
            raise BadRequestException(f"Invalid boolean value: {value}")
        return lowered in ("true", "1")
    enum_type = getattr(field, "enum_type", None)
    if enum_type is not None:
        try:
            return enum_type(value)
        except ValueError:
            raise BadRequestException(f"Invalid value for {field.model_field_name}: {value}")
    if isinstance(field, (orm_fields.IntField, orm_fields.FloatField)):
        try:
            number = field.field_type(value)
        except ValueError:
            raise BadRequestException(f"Invalid numeric value: {value}")
        if isinstance(number, int) and abs(number) > MAX_INTEGER:
            raise BadRequestException(f"Numeric value out of range: {value}")
        return number
    return value


def build_filters(model, params: dict, hidden=()) -> dict:
    """把 `field` / `field[op]` 形式的查询参数转换为 ORM 过滤条件，未知字段忽略"""
    filterable = _filterable_fields(model, hidden)
    filters = {}

    for key, value in params.items():
        if key in RESERVED_PARAMS:
            continue
        match = FILTER_KEY.match(key)
        if not match or match.group(1) not in filterable:
            continue

        name, op = match.groups()
        field = filterable[name]
        column = f"{name}_id" if name in model._meta.fk_fields else name

        if op == "in":
            filters[f"{column}__in"] = [_coerce(field, v) for v in value.split(",") if v]
        elif op:
            filters[f"{column}__{op}"] = _coerce(field, value)
        else:
            filters[column] = _coerce(field, value)

    return filters


def _field_list(model, raw: str | None, hidden=()) -> list[str]:
    if not raw:
        return []
    filterable = _filterable_fields(model, hidden)
    result = []
    for item in raw.split(","):
        item = item.strip()
        name = item.lstrip("-")
        if not name:
            continue
        if name not in filterable:
            raise BadRequestException(f"Unknown field: {name}")
        if name in model._meta.fk_fields:
            item = item.replace(name, f"{name}_id", 1)
        result.append(item)
    return result


def _positive_int(value, default, name, maximum=None):
    if value in (None, ""):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise BadRequestException(f"{name} must be an integer")
    if number < 1:
        raise BadRequestException(f"{name} must be at least 1")
    if maximum is not None and number > maximum:
        raise BadRequestException(f"{name} must be at most {maximum}")
    return number


async def advanced_results(model, params: dict, hidden=(), **base_filters) -> PageResult:
    """
    按查询参数执行列表查询

    Args:
        model: Tortoise 模型类
        params: 已清洗的查询参数（每个键一个值）
        hidden: 不允许选择、排序或过滤的字段
        base_filters: 固定的过滤条件

    Returns:
        PageResult，选择了字段时 items 为字典列表
    """
    limit = min(_positive_int(params.get("limit"), DEFAULT_LIMIT, "limit"), MAX_LIMIT)
    # 偏移量 (page - 1) * limit 不能超出整数上限
    page = _positive_int(params.get("page"), 1, "page", maximum=MAX_INTEGER // limit)
    order_by = _field_list(model, params.get("sort"), hidden) or ["-created_at"]
    selected = _field_list(model, params.get("select"), hidden)

    query = model.filter(**base_filters, **build_filters(model, params, hidden))
    total = await query.count()
    query = query.order_by(*order_by).offset((page - 1) * limit).limit(limit)

    if selected:
        columns = ["id"] + [name for name in selected if name != "id"]
        items = await query.values(*columns)
    else:
        items = await query

    return PageResult(items=list(items), total=total, page=page, limit=limit, selected=bool(selected))
