"""Gate service layer shared by the CLI and library callers."""

from orbitgate.service.gate import ValidationGate, validate
from orbitgate.service.render import render_json, render_text

__all__ = [
    "ValidationGate",
    "render_json",
    "render_text",
    "validate",
]
