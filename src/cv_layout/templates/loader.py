from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from cv_layout.models.section import FieldMapping, TemplateSection


class CVTemplate(BaseModel):
    name: str
    layout: str | None = None  # None: decided from section placements
    orientation: str | None = None
    max_pages: int | None = Field(default=None, ge=1)
    sections: list[TemplateSection]
    field_mappings: list[FieldMapping] = Field(default_factory=list)


TEMPLATES_DIR = Path(__file__).parent / "presets"


def load_template(name: str) -> CVTemplate:
    """Load a bundled template preset by name."""
    path = TEMPLATES_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Template not found: {name}")
    return load_template_file(path)


def load_template_file(path: str | Path) -> CVTemplate:
    """Load a template from a YAML file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return CVTemplate(**data)


def resolve_template(name_or_path: str | Path) -> CVTemplate:
    """Load a preset by name, or a template file when given a path."""
    path = Path(name_or_path)
    if path.suffix.lower() in (".yaml", ".yml"):
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {name_or_path}")
        return load_template_file(path)
    return load_template(str(name_or_path))


def list_templates() -> list[str]:
    """List available template preset names."""
    return [p.stem for p in TEMPLATES_DIR.glob("*.yaml")]
