# src/vigil/observers/console.py
from .interface import Listener


class ConsoleWarningListener(Listener):
    def on_warning(self, message: str) -> None:
        print(f"Warning: {message}")
