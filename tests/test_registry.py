import pytest

from argwise import ArgumentParser, ParamRegistry


def test_register_strips_dashes():
    registry = ParamRegistry()
    registry.register("--output", "-o")
    assert registry.is_registered("output")
    assert registry.is_registered("--o")
    assert "o" in registry
    assert registry.names == frozenset({"output", "o"})


def test_register_is_idempotent():
    registry = ParamRegistry(["a"])
    registry.register("a", "--a", "-a")
    assert len(registry) == 1
    assert list(registry) == ["a"]


def test_iteration_is_sorted():
    registry = ParamRegistry(["zeta", "alpha", "m"])
    assert list(registry) == ["alpha", "m", "zeta"]


def test_unregistered():
    registry = ParamRegistry(["a"])
    assert not registry.is_registered("b")
    assert 1 not in registry


def test_register_rejects_bad_names():
    registry = ParamRegistry()
    with pytest.raises(TypeError):
        registry.register(1)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        registry.register("")


def test_registry_is_not_changed_by_parsing():
    parser = ArgumentParser(params=["o"])
    parser.parse(["-o", "x", "--y=1", "-z", "v"])
    assert parser.registry.names == frozenset({"o"})


def test_parser_register_delegates():
    parser = ArgumentParser()
    parser.register("-j", "--jobs")
    assert parser.is_registered("jobs")
    assert "j" in parser.registry
    assert repr(parser.registry) == "ParamRegistry(['j', 'jobs'])"
