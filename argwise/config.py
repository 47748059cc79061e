# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argwise parsers.

A parser configuration names the value-bearing parameters and the default
`ParseMode`. It can live in its own YAML/TOML file or under an `argwise`
section of a larger one:

    # argwise.yaml
    params: [o, output, j]
    mode: [prefer-param, multiflag]

    # pyproject-style TOML
    [argwise]
    params = ["o", "output"]
    mode = "multiflag"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from argwise.exceptions import ConfigError
from argwise.logger import logger
from argwise.mode import ParseMode
from argwise.parser.argument_parser import ArgumentParser


class ParserConfig(BaseModel):
    """Argwise parser configuration model."""

    params: list[str] = Field(default_factory=list)
    mode: ParseMode = ParseMode.PREFER_FLAG_FOR_UNREG_OPTION

    @field_validator("params", mode="before")
    @classmethod
    def validate_params(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("params")
    @classmethod
    def validate_param_names(cls, value: list[str]) -> list[str]:
        for name in value:
            if not name.strip("-"):
                raise ValueError(f"Invalid parameter name: '{name}'")
        return value

    @field_validator("mode", mode="plain")
    @classmethod
    def validate_mode(cls, value: Any) -> ParseMode:
        try:
            return ParseMode.coerce(value)
        except TypeError as error:
            raise ValueError(str(error)) from error

    @model_validator(mode="after")
    def validate_mode_conflict(self) -> ParserConfig:
        ParseMode.validate(self.mode)
        return self

    def to_parser(self) -> ArgumentParser:
        return ArgumentParser(params=self.params, mode=self.mode)


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Load an Argwise parser configuration from a YAML or TOML file.

    The document (or its `argwise` section, when present) should be a mapping
    with optional `params` and `mode` keys. TOML is read with the `toml`
    package, which loads some truncated arrays (`params = [`) as empty lists
    instead of rejecting them.

    Args:
        file_path (str | Path): Path to the config file (YAML or TOML).

    Returns:
        ArgumentParser: A parser with the configured registry and default mode.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "params: [o, output]\n"
            "mode: multiflag"
        )
    section = raw_config.get("argwise", raw_config)
    if not isinstance(section, dict):
        raise ConfigError("The 'argwise' section must be a mapping.")

    try:
        config = ParserConfig(
            params=section.get("params", []),
            mode=section.get("mode"),
        )
    except ValidationError as error:
        raise ConfigError(f"Invalid parser configuration in {path}:\n{error}") from error

    logger.debug(
        "Loaded parser config from %s: %d params, mode %s",
        path,
        len(config.params),
        config.mode,
    )
    return config.to_parser()
