"""Utilities for reading configs and writing generated codes."""

import csv
import io
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

from .core.models import Config


def load_config(file_path: Path) -> Config:
    """Load and validate a generation config from a YAML file."""
    if file_path.suffix not in [".yaml", ".yml"]:
        raise ValueError(f"Unsupported file type: {file_path.suffix}")
    yaml_obj = YAML()
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml_obj.load(f) or {}
    return Config.model_validate(data)


def quote_strings(obj):
    """Recursively wrap strings so they are emitted double-quoted."""
    if isinstance(obj, dict):
        return {k: quote_strings(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [quote_strings(item) for item in obj]
    elif isinstance(obj, str):
        return DoubleQuotedScalarString(obj)
    else:
        return obj


def dump_config(config: Config) -> str:
    """Render a config as YAML with all strings quoted."""
    data = config.model_dump(by_alias=True)
    stream = io.StringIO()
    YAML().dump(quote_strings(data), stream)
    return stream.getvalue()


def write_codes(codes: list[str], output_path: Path) -> None:
    """Write codes to a .txt, .yaml/.yml or .csv file."""
    if output_path.suffix == ".txt":
        with open(output_path, "w", encoding="utf-8") as f:
            for code in codes:
                f.write(code + "\n")
    elif output_path.suffix in [".yaml", ".yml"]:
        with open(output_path, "w", encoding="utf-8") as f:
            YAML().dump(quote_strings({"codes": list(codes)}), f)
    elif output_path.suffix == ".csv":
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["code"])
            for code in codes:
                writer.writerow([code])
    else:
        raise ValueError(f"Unsupported file type: {output_path.suffix}")
