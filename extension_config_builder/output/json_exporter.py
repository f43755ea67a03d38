"""
JSON exporter for assembled extension configs.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union
import logging

logger = logging.getLogger(__name__)


def config_to_json(config: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a config to a JSON string."""
    return json.dumps(config, indent=indent, ensure_ascii=False, default=str)


def export_to_json(
    config: Dict[str, Any],
    output_path: Union[str, Path],
    indent: int = 2
) -> Path:
    """
    Export config to JSON file.

    Args:
        config: Assembled extension config
        output_path: Path for output file
        indent: JSON indentation level

    Returns:
        Path to exported file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(config_to_json(config, indent=indent))
        f.write("\n")

    logger.info(f"Exported JSON: {output_path}")
    return output_path
