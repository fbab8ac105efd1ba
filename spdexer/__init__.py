"""
spdexer: SPDX license headers for Go projects.

Renders a license template with project metadata and writes it at the
top of every Go source file, replacing any license header already there.
"""

__version__ = "0.1.0"

from spdexer.detector import detect_boundary
from spdexer.engine import HeaderEngine
from spdexer.types import TemplateData

__all__ = ["HeaderEngine", "TemplateData", "detect_boundary", "__version__"]
