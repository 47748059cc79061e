"""
Classify this script's own arguments and print the result.

    python examples/classify_argv.py build -v --name=foo -o out.txt -xf file.txt -5
"""
import logging

from argwise import ArgumentParser, ParseMode
from argwise.utils import setup_logging

setup_logging(mode="cli", log_filename=None, console_log_level=logging.INFO)

parser = ArgumentParser(params=["o", "output", "f"])
result = parser.parse_argv(
    mode=ParseMode.SINGLE_DASH_IS_MULTIFLAG | ParseMode.PREFER_FLAG_FOR_UNREG_OPTION
)
result.summary()

output = result.value(["o", "output"], default="-")
print(f"output: {output.text} ({output.source})")
print(f"verbose: {result[['v', 'verbose']]}")
