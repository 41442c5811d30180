"""Prompt table and template prompts."""

from .table import PromptTable, template_prompt

__all__ = ["PromptTable", "template_prompt"]
