"""Top-level package of the DITA to federated-wiki converter.

Front-ends (CLI, batch jobs) should only depend on the public API exposed
here rather than importing internal modules directly.
"""

from .core.models import Index, Topic  # re-export for convenience
from .core.services import ConversionReport, ConversionService

__all__: list[str] = [
    "ConversionReport",
    "ConversionService",
    "Index",
    "Topic",
]
