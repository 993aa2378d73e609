"""Prompt templates for the selection commands."""

from selection_gemini.services.prompts.prompt_builder import PROMPT_TEMPLATES, build_prompt

__all__ = ["PROMPT_TEMPLATES", "build_prompt"]
