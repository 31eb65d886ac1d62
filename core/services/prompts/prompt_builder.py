"""Prompt builder for the answer search and verification calls."""
from pathlib import Path
from typing import Tuple

from core.utils.logger import logger


class PromptBuilder:
    """Loads prompt templates and fills in the question."""

    def __init__(self):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = Path(__file__).parent / "templates"

    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        prompt_path = self._prompts_dir / filename
        try:
            content = prompt_path.read_text(encoding="utf-8")
            # Front matter is delimited by two "---" lines
            if content.startswith("---\n"):
                parts = content.split("---\n", 2)
                if len(parts) >= 3:
                    return parts[2].strip()
            return content.strip()
        except OSError as e:
            logger.warning(f"Failed to load prompt {filename}: {str(e)}")
            return ""

    def build_search_prompts(self, question: str) -> Tuple[str, str]:
        """Build (system_prompt, user_prompt) for the search model."""
        return self._load_prompt("search_system_prompt.promptly"), question

    def build_verification_prompts(self, question: str, candidate: str) -> Tuple[str, str]:
        """Build (system_prompt, user_prompt) for the verification model."""
        system_prompt = self._load_prompt("verification_system_prompt.promptly")
        # str.replace, not str.format: the candidate is JSON full of braces
        user_prompt = (
            self._load_prompt("verification_user_prompt.promptly")
            .replace("{question}", question)
            .replace("{candidate}", candidate)
        )
        return system_prompt, user_prompt
