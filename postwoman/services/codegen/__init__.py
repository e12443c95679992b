"""
Code generators: render a request configuration as runnable source code.
"""

from typing import Callable

from ...schemas.enums import CodeLanguage
from ...schemas.request import RequestConfig
from .curl import generate_curl
from .python import generate_python
from .swift import generate_swift

GENERATORS: dict[CodeLanguage, Callable[[RequestConfig], str]] = {
    CodeLanguage.CURL: generate_curl,
    CodeLanguage.SWIFT: generate_swift,
    CodeLanguage.PYTHON: generate_python,
}


def generate_code(config: RequestConfig, language: CodeLanguage) -> str:
    """Render ``config`` in the given target language."""
    return GENERATORS[CodeLanguage(language)](config)


__all__ = [
    "GENERATORS",
    "generate_code",
    "generate_curl",
    "generate_python",
    "generate_swift",
]
