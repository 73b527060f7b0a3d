#!/usr/bin/env python3
"""
Maintain the sensitive word list.

Usage:
    python manage_words.py list                 # Show all words
    python manage_words.py add WORD [WORD...]   # Add words
    python manage_words.py remove ID [ID...]    # Remove words by id
    python manage_words.py check TEXT           # Screen a text
    python manage_words.py import FILE          # Add words from file (one per line)
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from app.errors import AppError, ValidationError
from app.repositories.db import close_db
from settings import LOG_LEVEL
from settings.logging import setup_logging
from web.api.errors import error_payload

logger = setup_logging(level=LOG_LEVEL, to_file=True, component="manage_words")


def cmd_list(_args: list[str]) -> None:
    words = container.word_admin.list_words()
    for w in words:
        print(f"{w.id:>6}  {w.word}")
    print(f"\n{len(words)} words")


def cmd_add(args: list[str]) -> None:
    for word in args:
        created = container.word_admin.add_word(word)
        print(f"✅ Added {created.word!r} (id {created.id})")


def cmd_remove(args: list[str]) -> None:
    bad = [a for a in args if not a.isdigit()]
    if bad:
        raise ValidationError("remove expects numeric ids, got: " + ", ".join(bad))
    for word_id in map(int, args):
        container.word_admin.remove_word(word_id)
        print(f"🗑️  Removed id {word_id}")


def cmd_check(args: list[str]) -> None:
    result = container.word_cache.check_text(" ".join(args))
    if result.is_sensitive:
        print("❌ Sensitive: " + ", ".join(result.matched_words))
        sys.exit(2)
    print("✅ Clean")


def cmd_import(args: list[str]) -> None:
    path = Path(args[0])
    lines = path.read_text(encoding="utf-8").splitlines()
    result = container.word_admin.import_words(lines)
    print(f"✅ Added {len(result['added'])}, skipped {len(result['skipped'])} existing")


COMMANDS = {
    "list": (cmd_list, 0),
    "add": (cmd_add, 1),
    "remove": (cmd_remove, 1),
    "check": (cmd_check, 1),
    "import": (cmd_import, 1),
}


def main():
    args = sys.argv[1:]
    if not args or args[0] not in COMMANDS:
        print(__doc__)
        sys.exit(1)

    command, min_args = COMMANDS[args[0]]
    if len(args) - 1 < min_args:
        print(__doc__)
        sys.exit(1)

    container.init()
    try:
        command(args[1:])
    except AppError as e:
        payload = error_payload(e)
        logger.error("{}: {}", payload["error"], payload["message"])
        sys.exit(1)
    finally:
        close_db()


if __name__ == "__main__":
    main()
