"""Tests for file_utils."""

import pytest
from ruamel.yaml import YAML
from refgen.core.charset import Custom, Numeric
from refgen.core.models import Config
from refgen.core.pattern import FixedLength, Template
from refgen.file_utils import dump_config, load_config, write_codes


@pytest.fixture
def codes():
    return ["AB12", "CD34", "EF56"]


def test_load_config_shorthand(tmp_path):
    config_file = tmp_path / "codes.yaml"
    config_file.write_text('pattern: "REF-####"\ncharset: numeric\ncount: 25\nprefix: "X"\n')
    config = load_config(config_file)
    assert config.pattern == Template(template="REF-####")
    assert isinstance(config.charset, Numeric)
    assert config.count == 25
    assert config.prefix == "X"


def test_load_config_empty_file(tmp_path):
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    assert load_config(config_file) == Config()


def test_load_config_unsupported(tmp_path):
    config_file = tmp_path / "codes.json"
    config_file.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported file type: .json"):
        load_config(config_file)


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_dump_config_loads_back(tmp_path):
    config = Config(
        pattern=FixedLength(length=5), count=7, charset=Custom(pool="abc"), postfix="#1"
    )
    yaml_str = dump_config(config)
    assert '"custom"' in yaml_str
    config_file = tmp_path / "dumped.yaml"
    config_file.write_text(yaml_str)
    assert load_config(config_file) == config


def test_write_codes_txt(tmp_path, codes):
    output = tmp_path / "codes.txt"
    write_codes(codes, output)
    assert output.read_text().splitlines() == codes


def test_write_codes_yaml(tmp_path, codes):
    output = tmp_path / "codes.yaml"
    write_codes(codes, output)
    with open(output, "r") as f:
        data = YAML().load(f)
    assert list(data["codes"]) == codes


def test_write_codes_csv(tmp_path, codes):
    output = tmp_path / "codes.csv"
    write_codes(codes, output)
    assert output.read_text().splitlines() == ["code"] + codes


def test_write_codes_unsupported(tmp_path, codes):
    with pytest.raises(ValueError, match="Unsupported file type: .pdf"):
        write_codes(codes, tmp_path / "codes.pdf")
