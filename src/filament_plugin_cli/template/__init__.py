"""Stub template rendering for plugin scaffolding."""

from .processor import (
    StubProcessor,
    render,
    resolve_conditional_block,
    substitute_tokens,
)
from .stubs import get_stubs_root, page_stub, stub_path

__all__ = [
    "StubProcessor",
    "get_stubs_root",
    "page_stub",
    "render",
    "resolve_conditional_block",
    "stub_path",
    "substitute_tokens",
]
