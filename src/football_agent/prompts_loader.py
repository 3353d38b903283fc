"""Load versioned prompts from YAML."""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

PROMPTS_PATH = Path(__file__).parent / "prompts" / "prompt_versions.yaml"


def load_prompt(
    version_key: str = "v1", path: Optional[Union[str, Path]] = None
) -> Dict[str, str]:
    """Load a specific prompt version from prompt_versions.yaml.

    Returns:
        Dict with 'system' and 'user_template' keys
    """
    prompt_path = Path(path) if path else PROMPTS_PATH
    if not prompt_path.exists():
        error_msg = f"Could not find prompt file: {prompt_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    with open(prompt_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    version_data = data.get("versions", {}).get(version_key)
    if not version_data:
        valid_keys = list(data.get("versions", {}).keys())
        raise KeyError(
            f"Version '{version_key}' not found in {prompt_path.name}. Available: {valid_keys}"
        )

    logger.info(f"Loaded prompt version: {version_key}")
    return {
        "system": version_data["system"].strip(),
        "user_template": version_data["user_template"],
    }
