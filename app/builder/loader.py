"""Read feature definitions from YAML or JSON files."""
import json
from pathlib import Path
from typing import Union
import yaml
from app.schemas.features import FeatureDefinition


def load_feature_definition(path: Union[str, Path]) -> FeatureDefinition:
    """
    Parse a feature definition file.

    ``.json`` files are read with the json module, anything else as YAML.
    Keys may be camelCase or snake_case.

    Raises:
        ValueError: if the document is not a mapping
        pydantic.ValidationError: if the definition is invalid
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return FeatureDefinition.model_validate(data)
