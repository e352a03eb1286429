"""
Command-line entry point and one-shot generator function.
"""
from __future__ import annotations

from typing import Any

from .generator import PasswordGenerator


def generate_password(preset: str = "DEFAULT", **kwargs: Any) -> str:
    """
    One password from a throwaway generator.

    `preset` picks the starting config; any other keyword arguments are
    passed straight to PasswordGenerator (overrides, dictionary,
    random_source, ...).
    """
    return PasswordGenerator(preset=preset, **kwargs).generate()


def main() -> None:
    """
    Entry point for `python -m mempass.cli` or `run_mempass.py`.
    """
    password = generate_password()
    print("\n[Memorable Password Generator]")
    print(f"Generated password: {password}\n")


if __name__ == "__main__":
    main()
