"""Prompt building exports."""

from .prompt_builder import STEP_DELIMITER, build_class_prompt, build_page_prompt

__all__ = [
    "STEP_DELIMITER",
    "build_class_prompt",
    "build_page_prompt",
]
