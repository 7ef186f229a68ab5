import json
from pathlib import Path

import yaml


def parse_profile(file_path: str | Path) -> dict:
    """Load an employee profile data bag from a JSON or YAML file."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a mapping, got {type(data).__name__}")
    return data
