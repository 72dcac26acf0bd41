"""
jsonreader: typed, path-addressed access to decoded JSON trees.

This package uses a src-layout. Import the package as `jsonreader`.
"""

from importlib.metadata import version

__version__ = version("jsonreader")

from .config import JSONREADER_CONFIG, JSONReaderConfig
from .errors import (
    ComponentStep,
    DocumentDecodeError,
    ExpectedComponentError,
    ExpectedEndOfSubscriptError,
    InvalidPathConstant,
    InvalidSubscriptError,
    InvalidSubscriptValueError,
    JSONReaderError,
    MissingValueError,
    PathParsingError,
    PathTraversalError,
    ReaderMissingValueError,
    ReaderUnexpectedTypeError,
    ReaderValueError,
    UnexpectedEndOfStringError,
    UnexpectedTypeError,
)
from .path import (
    SELF_REFERENCE,
    Component,
    JSONPath,
    NumericComponent,
    PathCache,
    SelfReferenceComponent,
    TextComponent,
    enumerate_components,
    get_path_cache,
    iter_components,
    set_path_cache,
)
from .reader import MISSING, JSONReader, TreeKind, kind_of
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "Component",
    "ComponentStep",
    "DocumentDecodeError",
    "ExpectedComponentError",
    "ExpectedEndOfSubscriptError",
    "InvalidPathConstant",
    "InvalidSubscriptError",
    "InvalidSubscriptValueError",
    "JSONPath",
    "JSONREADER_CONFIG",
    "JSONReader",
    "JSONReaderConfig",
    "JSONReaderError",
    "MISSING",
    "MissingValueError",
    "NumericComponent",
    "PathCache",
    "PathParsingError",
    "PathTraversalError",
    "ReaderMissingValueError",
    "ReaderUnexpectedTypeError",
    "ReaderValueError",
    "SELF_REFERENCE",
    "SelfReferenceComponent",
    "TextComponent",
    "TreeKind",
    "UnexpectedEndOfStringError",
    "UnexpectedTypeError",
    "configure_logging",
    "enumerate_components",
    "get_logger",
    "get_path_cache",
    "iter_components",
    "kind_of",
    "set_path_cache",
]
