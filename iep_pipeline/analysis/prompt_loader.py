from pathlib import Path

from iep_pipeline.analysis.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, directory: Path | None = None) -> str:
    """Load a bundled prompt file.

    Args:
        name: File name inside the prompt directory, e.g. ``analysis_prompt.txt``.
        directory: Override for the bundled ``prompts`` directory.

    Returns:
        The file content with trailing whitespace removed.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    path = (directory or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").rstrip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt {name}: {exc}") from exc
