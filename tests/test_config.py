import pytest
from pydantic import ValidationError

from argwise import ArgumentParser, ConfigError, ParseMode
from argwise.config import ParserConfig, loader


def test_yaml_config(tmp_path):
    path = tmp_path / "argwise.yaml"
    path.write_text("params: [o, --output]\nmode: [prefer-param, multiflag]\n")
    parser = loader(path)
    assert isinstance(parser, ArgumentParser)
    assert parser.is_registered("output")
    assert parser.mode == (
        ParseMode.PREFER_PARAM_FOR_UNREG_OPTION | ParseMode.SINGLE_DASH_IS_MULTIFLAG
    )
    result = parser.parse(["-xo", "out.txt"])
    assert set(result.flags) == {"x"}
    assert result.value("o").text == "out.txt"


def test_toml_config_section(tmp_path):
    path = tmp_path / "tool.toml"
    path.write_text('[argwise]\nparams = ["f"]\nmode = "no-split"\n')
    parser = loader(str(path))
    assert parser.is_registered("f")
    assert parser.mode is ParseMode.NO_SPLIT_ON_EQUALSIGN


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    parser = loader(path)
    assert len(parser.registry) == 0
    assert parser.mode is ParseMode.PREFER_FLAG_FOR_UNREG_OPTION


def test_integer_mode(tmp_path):
    path = tmp_path / "argwise.yaml"
    path.write_text("mode: 10\nparams: j\n")
    parser = loader(path)
    assert parser.mode == (
        ParseMode.PREFER_PARAM_FOR_UNREG_OPTION | ParseMode.SINGLE_DASH_IS_MULTIFLAG
    )
    assert parser.is_registered("j")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "argwise.json"
    path.write_text("{}")
    with pytest.raises(ConfigError):
        loader(path)


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "argwise: nope\n",
        "mode: [prefer-flag, prefer-param]\n",
        "mode: sideways\n",
        "params: ['--']\n",
        "params: [o\n",
    ],
)
def test_invalid_yaml_content(tmp_path, content):
    path = tmp_path / "argwise.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        loader(path)


@pytest.mark.parametrize("content", ["[argwise\n", "params = b\n"])
def test_invalid_toml(tmp_path, content):
    # toml tolerates an unterminated array such as "params = [", so use
    # documents it rejects outright
    path = tmp_path / "argwise.toml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        loader(path)


def test_parser_config_model():
    config = ParserConfig(params=["-a"], mode="multiflag")
    assert config.mode is ParseMode.SINGLE_DASH_IS_MULTIFLAG
    parser = config.to_parser()
    assert parser.is_registered("a")

    with pytest.raises(ValidationError):
        ParserConfig(mode=3)
