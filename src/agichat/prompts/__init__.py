"""Prompt management module.

Externalizes prompts to text files for easy customization.
Prompts can be overridden by placing files in ./prompts/ of the working directory.
"""

from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent

# Appended to the system instruction for each AppSettings.response_style
STYLE_HINTS = {
    "balanced": "",
    "concise": "Keep answers short: a few sentences or a compact list unless code is requested.",
    "detailed": "Give thorough, well-structured answers with explanations and examples.",
}


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: agichat/prompts/{name}.txt

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").strip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_system_prompt() -> str:
    """Get the default persona instruction sent with every request."""
    return load_prompt("system")


__all__ = [
    "STYLE_HINTS",
    "load_prompt",
    "get_system_prompt",
]
