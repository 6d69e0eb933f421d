import argparse
import sys
import traceback
from datetime import datetime

from colorama import just_fix_windows_console

from cyberbot.config import CRASH_LOG, DATA_FILE, FAREWELL_MESSAGE, WELCOME_GREETING
from cyberbot.dialogue import ConversationDispatcher
from cyberbot.knowledge import KnowledgeBase
from cyberbot.memory import UsageMemory
from cyberbot.persistence import InMemoryKeywordStore, KeywordStore
from cyberbot.systems import VoiceIO
from cyberbot.ui import ConsoleUI, ScriptedInput
from cyberbot.utils import is_valid_name


def write_crash_log(label: str = ""):
    log_message = f"--- CRASH LOG{label}: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} ---\n"
    log_message += traceback.format_exc()
    log_message += "\n--- END OF LOG ---\n"
    try:
        with open(CRASH_LOG, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError as e:
        print(f"Could not write crash log: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CyberBot - Cybersecurity Awareness Assistant")
    parser.add_argument("--gui", action="store_true", help="Open the Tkinter window instead of the console.")
    parser.add_argument("--no-voice", action="store_true", help="Disable the spoken welcome greeting.")
    parser.add_argument("--no-typing", action="store_true", help="Print replies at once instead of typing them out.")
    parser.add_argument("--input-file", type=str, help="Path to a file containing user inputs, one per line.")
    parser.add_argument("--data-file", type=str, default=DATA_FILE, help="Where keyword counts are stored.")
    parser.add_argument("--ephemeral", action="store_true", help="Keep keyword counts in memory only.")
    parser.add_argument("--name", type=str, help="Skip the name prompt and use this name.")
    return parser


def run_console(args, kb: KnowledgeBase, memory: UsageMemory, voice: VoiceIO) -> int:
    console = ConsoleUI(typing=not (args.no_typing or args.input_file))
    console.display_banner()
    voice.speak(WELCOME_GREETING)

    if args.name and is_valid_name(args.name):
        memory.user_name = args.name
    else:
        if args.name:
            console.display_error("Only letters and spaces allowed.")
        memory.user_name = console.get_user_name()
    console.display_welcome_message(memory.user_name)
    console.display_system_message("Type 'help' to see available topics or 'exit' to quit.")

    ui = console
    if args.input_file:
        try:
            ui = ScriptedInput.from_file(console, args.input_file)
        except OSError as e:
            console.display_error(f"Could not read input file {args.input_file}: {e}")
            return 1

    dispatcher = ConversationDispatcher(kb, memory, ui)
    try:
        dispatcher.run()
    except KeyboardInterrupt:
        console.write("\n")
        console.display_system_message(FAREWELL_MESSAGE)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    try:
        store = InMemoryKeywordStore() if args.ephemeral else KeywordStore(args.data_file)
        kb = KnowledgeBase()
        memory = UsageMemory(store)
        voice = VoiceIO(enabled=not args.no_voice)
    except Exception as e:
        print(f"Critical failure: {e}")
        write_crash_log(" (Startup)")
        return 1

    try:
        if args.gui:
            from cyberbot.gui import CyberBotGUI
            CyberBotGUI(kb, memory, voice).start()
            return 0
        return run_console(args, kb, memory, voice)
    except Exception as e:
        print(f"\nFatal application error: {e}")
        write_crash_log()
        print(f"A crash report has been saved to '{CRASH_LOG}'.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
