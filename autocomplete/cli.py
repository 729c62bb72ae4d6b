"""CLI / terminal mode for prefix suggestions."""

from __future__ import annotations

from autocomplete.constants import DEFAULT_LIMIT
from autocomplete.wordlist import WordList


def print_help() -> None:
    print("Commands:")
    print("  PREFIX                -- list words starting with PREFIX")
    print("  :add WORD             -- add a word to the list")
    print("  :size                 -- number of known words")
    print("  :quit                 -- exit")
    print()


def show_suggestions(wordlist: WordList, prefix: str, limit: int) -> None:
    matches = wordlist.suggest(prefix)
    if not matches:
        print(f"  No words start with '{prefix}'.")
        return

    shown = matches[:limit]
    more = len(matches) - len(shown)
    print(f"  {len(matches)} match{'es' if len(matches) != 1 else ''}:")
    for i, word in enumerate(shown):
        print(f"  {i+1:>3}. {word}")
    if more:
        print(f"       ... and {more} more")
    if wordlist.is_valid(prefix):
        print(f"  '{prefix.strip().lower()}' is itself a word.")


def run_cli(wordlist: WordList, limit: int = DEFAULT_LIMIT) -> None:
    """Run the interactive suggestion prompt until :quit or EOF."""
    print("\n" + "=" * 60)
    print("  AUTOCOMPLETE -- Prefix Suggestions")
    print("=" * 60)
    print()
    print_help()

    while True:
        try:
            inp = input("  prefix> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue

        cmd = inp.lower()
        if cmd in (":quit", ":q"):
            break
        if cmd == ":size":
            print(f"  {len(wordlist):,} words")
            continue
        if cmd == ":help":
            print_help()
            continue

        if cmd.startswith(":add"):
            parts = inp.split()
            if len(parts) != 2:
                print("  Format: :add WORD")
            elif wordlist.add(parts[1]):
                print(f"  Added '{parts[1].lower()}'  ({len(wordlist):,} words)")
            else:
                print("  Invalid.  Words must be letters only.")
            continue
        if cmd.startswith(":"):
            print(f"  Unknown command '{inp}'.  Type :help")
            continue

        show_suggestions(wordlist, inp, limit)
