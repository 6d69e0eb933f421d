import sys
import time
from typing import Callable, Iterable, Optional

from colorama import Fore, Style

from cyberbot.config import (
    BANNER, DEFAULT_USER_NAME, MAX_NAME_ATTEMPTS, RESPONSE_TYPING_DELAY_MS, SYSTEM_TYPING_DELAY_MS,
)
from cyberbot.utils import is_valid_name


# -----------------------------
# Console UI
# -----------------------------
class ConsoleUI:
    """Coloured console front-end: banner, name prompt, typed replies, red errors."""

    def __init__(self, input_func: Callable[[str], str] = input, out=None,
                 typing: bool = True, sleep: Callable[[float], None] = time.sleep):
        self.input_func = input_func
        self.out = out if out is not None else sys.stdout
        self.typing = typing
        self.sleep = sleep

    def write(self, text: str):
        self.out.write(text)
        self.out.flush()

    def display_banner(self):
        for line in BANNER:
            self.write(f"{Fore.CYAN}{line}{Style.RESET_ALL}\n")
        self.write("\n")

    def get_user_name(self, max_attempts: int = MAX_NAME_ATTEMPTS) -> str:
        """Asks for a name made of letters and spaces. Falls back to 'User'."""
        for _ in range(max_attempts):
            try:
                name = self.input_func(f"{Fore.CYAN}Enter your name: {Style.RESET_ALL}").strip()
            except EOFError:
                break
            if not name:
                self.display_error("Name cannot be empty.")
                continue
            if is_valid_name(name):
                return name
            self.display_error("Only letters and spaces allowed.")

        self.write(f"{Fore.YELLOW}Using default name '{DEFAULT_USER_NAME}'{Style.RESET_ALL}\n")
        return DEFAULT_USER_NAME

    def display_welcome_message(self, name: str):
        rule = "=" * 63
        self.write(f"{Fore.CYAN}{rule}\n")
        self.write(f"  Hello, {name}! Welcome to the Cybersecurity Awareness Bot.\n")
        self.write("  I'm here to help you stay safe online.\n")
        self.write(f"{rule}{Style.RESET_ALL}\n\n")

    def read_line(self, user_name: str) -> Optional[str]:
        """Returns the next line, or None when input is exhausted."""
        try:
            return self.input_func(f"{Fore.YELLOW}{user_name}: {Style.RESET_ALL}")
        except EOFError:
            return None

    def show_response(self, text: str):
        self.write(f"{Fore.WHITE}ChatBot: {Fore.MAGENTA}")
        self.type_text(text.strip(), RESPONSE_TYPING_DELAY_MS)
        self.write(Style.RESET_ALL)

    def display_system_message(self, text: str):
        self.write(Fore.CYAN)
        self.type_text(text, SYSTEM_TYPING_DELAY_MS)
        self.write(Style.RESET_ALL)

    def display_error(self, text: str):
        self.write(f"{Fore.RED}Error: {text}{Style.RESET_ALL}\n")

    def type_text(self, text: str, delay_ms: int = 30):
        if not text:
            self.write("\n")
            return
        if not self.typing or delay_ms <= 0:
            self.write(text + "\n")
            return
        for c in text:
            self.write(c)
            self.sleep(delay_ms / 1000.0)
        self.write("\n")


class ScriptedInput:
    """Feeds lines from a file or list into the conversation, echoing each one.

    Output calls are passed straight through to the wrapped UI.
    """

    def __init__(self, ui: ConsoleUI, lines: Iterable[str]):
        self.ui = ui
        self._lines = iter(lines)

    @classmethod
    def from_file(cls, ui: ConsoleUI, path: str) -> "ScriptedInput":
        with open(path, 'r', encoding='utf-8') as f:
            return cls(ui, f.read().splitlines())

    def read_line(self, user_name: str) -> Optional[str]:
        line = next(self._lines, None)
        if line is not None:
            self.ui.write(f"{Fore.YELLOW}{user_name}: {Style.RESET_ALL}{line.strip()}\n")
        return line

    def show_response(self, text: str):
        self.ui.show_response(text)

    def display_system_message(self, text: str):
        self.ui.display_system_message(text)

    def display_error(self, text: str):
        self.ui.display_error(text)
