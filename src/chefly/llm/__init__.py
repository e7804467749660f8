"""Chefly - AI service access."""

from chefly.llm.client import generate_image, generate_text

__all__ = ["generate_text", "generate_image"]
