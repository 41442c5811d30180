"""
Content Producers

Concrete ContentProducer implementations:
- StaticProducer: in-memory text
- ModuleProducer: attribute of a content module, imported on first use
- FileProducer: file body, read at load time
- FunctionProducer: any zero-argument callable (sync or async)
"""

import asyncio
import importlib
from pathlib import Path
from typing import Any, Awaitable, Callable, Union

from pattern_hub.mcp_types import ContentProducer


class StaticProducer(ContentProducer):
    """Returns a fixed string."""

    def __init__(self, text: str):
        self.text = text

    def produce(self) -> str:
        return self.text

    def describe(self) -> str:
        return f"static ({len(self.text)} chars)"


class ModuleProducer(ContentProducer):
    """
    Reads `attribute` from `module_name`, importing the module lazily.

    A callable attribute is invoked and its return value used.
    """

    def __init__(self, module_name: str, attribute: str = "CONTENT"):
        self.module_name = module_name
        self.attribute = attribute

    def produce(self) -> Any:
        module = importlib.import_module(self.module_name)
        value = getattr(module, self.attribute)
        if callable(value):
            value = value()
        return value

    def describe(self) -> str:
        return f"{self.module_name}:{self.attribute}"


class FileProducer(ContentProducer):
    """Reads a UTF-8 text file off the event loop."""

    def __init__(self, path: Path):
        self.path = Path(path)

    async def produce(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")

    def describe(self) -> str:
        return str(self.path)


class FunctionProducer(ContentProducer):
    """Wraps a zero-argument function or coroutine function."""

    def __init__(self, func: Callable[[], Union[str, Awaitable[str]]]):
        self.func = func

    def produce(self) -> Union[str, Awaitable[str]]:
        return self.func()

    def describe(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))
