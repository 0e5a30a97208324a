"""Core domain: content identifiers, access gate and exception hierarchy."""

from docindex.core.access_gate import AccessGate
from docindex.core.content_id import identify

__all__ = ["AccessGate", "identify"]
