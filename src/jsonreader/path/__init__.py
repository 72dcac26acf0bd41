from .cache import PathCache, PathCacheInfo, get_path_cache, set_path_cache
from .components import (
    SELF_REFERENCE,
    Component,
    NumericComponent,
    SelfReferenceComponent,
    TextComponent,
    encode_text_subscript,
    render_components,
)
from .core import JSONPath, as_path
from .scanner import (
    ComponentVisitor,
    enumerate_components,
    iter_components,
    parse_components,
)

__all__ = [
    "Component",
    "ComponentVisitor",
    "JSONPath",
    "NumericComponent",
    "PathCache",
    "PathCacheInfo",
    "SELF_REFERENCE",
    "SelfReferenceComponent",
    "TextComponent",
    "as_path",
    "encode_text_subscript",
    "enumerate_components",
    "get_path_cache",
    "iter_components",
    "parse_components",
    "render_components",
    "set_path_cache",
]
