from rich.console import Console
from rich.table import Table

from argwise import ArgumentParser


def render(result) -> str:
    console = Console(record=True, width=100, color_system=None)
    result.summary(console=console)
    return console.export_text()


def test_to_table_rows():
    result = ArgumentParser(params=["o"]).parse(["in.txt", "-v", "-v", "-o", "out"])
    table = result.to_table()
    assert isinstance(table, Table)
    assert table.row_count == 3
    assert isinstance(result.__rich__(), Table)


def test_summary_output():
    result = ArgumentParser(params=["o"]).parse(["in.txt", "-v", "-v", "-o", "[out]"])
    text = render(result)
    assert "in.txt" in text
    assert "(x2)" in text
    assert "[out]" in text
    assert result.to_table().caption == "mode: PREFER_FLAG_FOR_UNREG_OPTION"


def test_empty_result_summary():
    text = render(ArgumentParser().parse([]))
    assert "empty" in text
