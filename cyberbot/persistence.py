import os
import tempfile
from typing import Dict, Iterable, Optional

from cyberbot.config import DATA_FILE


def parse_records(lines: Iterable[str]) -> Dict[str, int]:
    """Parses ``keyword:count`` lines. Malformed lines are skipped."""
    counts: Dict[str, int] = {}
    for line in lines:
        key, sep, value = line.partition(':')
        if not sep:
            continue
        key = key.strip().lower()
        value = value.strip()
        if not key or not (value.isascii() and value.isdigit()):
            continue
        counts[key] = int(value)
    return counts


def format_records(counts: Dict[str, int]) -> str:
    return "".join(f"{key}:{count}\n" for key, count in counts.items())


class KeywordStore:
    """Text file of ``keyword:count`` lines, rewritten in full on every save."""

    def __init__(self, path: str = DATA_FILE):
        self.path = path
        self.bak_path = f"{path}.bak"

    def load(self) -> Dict[str, int]:
        def _load_from(file_path: str) -> Optional[Dict[str, int]]:
            if not os.path.exists(file_path):
                return None
            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    return parse_records(f)
            except (IOError, OSError, UnicodeDecodeError) as e:
                print(f"Warning: Could not load keyword counts from {file_path}: {e}")
                return None

        counts = _load_from(self.path)
        if counts is not None:
            return counts

        # Main file missing or unreadable, try the backup before starting fresh
        counts = _load_from(self.bak_path)
        if counts is not None:
            print("Loaded keyword counts from backup. The next save will repair the main file.")
            return counts
        return {}

    def save(self, counts: Dict[str, int]) -> bool:
        # Temp file in the same directory so the rename stays atomic
        temp_dir = os.path.dirname(os.path.abspath(self.path))
        tmp_file_path = None
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=temp_dir, delete=False) as tmp_file:
                tmp_file_path = tmp_file.name
                tmp_file.write(format_records(counts))

            if os.path.exists(self.path):
                os.replace(self.path, self.bak_path)
            os.replace(tmp_file_path, self.path)
            return True
        except (IOError, OSError) as e:
            print(f"Error during save: {e}. Attempting to restore from backup.")
            try:
                if os.path.exists(self.bak_path) and not os.path.exists(self.path):
                    os.replace(self.bak_path, self.path)
            except OSError as e_restore:
                print(f"Error: Could not restore backup file: {e_restore}")
            return False
        finally:
            if tmp_file_path and os.path.exists(tmp_file_path):
                os.remove(tmp_file_path)


class InMemoryKeywordStore:
    """Keeps the serialized records in memory. Used for --ephemeral sessions and tests."""

    def __init__(self, text: str = ""):
        self.text = text
        self.saves = 0

    def load(self) -> Dict[str, int]:
        return parse_records(self.text.splitlines())

    def save(self, counts: Dict[str, int]) -> bool:
        self.text = format_records(counts)
        self.saves += 1
        return True
