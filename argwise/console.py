# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argwise rendering."""
from rich.console import Console

from argwise.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
