#!/usr/bin/env python3
"""Basic usage examples for the file-patcher library."""

import logging
import os
import tempfile

import file_patcher
from file_patcher import EditConfig, Editer, LineReplacer, Replacer, exclusive_edit

SSHD_CONFIG = """Port 22
#ListenAddress 0.0.0.0
PermitRootLogin yes
PasswordAuthentication yes
X11Forwarding yes
"""


def session_example():
    """Demonstrate several edits in one session."""
    print("=== Editing Session Example ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "sshd_config")
        file_patcher.fileio.create_string(path, SSHD_CONFIG)

        config = EditConfig(comment="#", backup=True)
        with Editer(path, config) as editer:
            # Harden the daemon
            count = editer.replace_at_line([
                LineReplacer("^PermitRootLogin", "yes", "no"),
                LineReplacer("^PasswordAuthentication", "yes", "no"),
            ])
            print(f"Changed {count} settings")

            # Listen on every address
            editer.comment_out([r"ListenAddress"])

            # Disable X11 forwarding altogether
            editer.comment([r"^X11Forwarding"])

            editer.append("UseDNS no\n")

        with open(path) as f:
            print(f.read())
        print(f"Backup kept at {path}~")


def one_shot_example():
    """Demonstrate the session-per-call functions."""
    print("\n=== One-Shot Example ===")

    with tempfile.NamedTemporaryFile(mode="w", suffix=".ini", delete=False) as tmp:
        for i in range(5):
            tmp.write(f"option_{i} = off off off\n")
        tmp_path = tmp.name

    try:
        # One replacement per entry across the whole file
        total = file_patcher.replace_n(tmp_path, None, [Replacer("off", "on")], 1)
        print(f"Whole-file limit of 1: {total} replacement")

        # The limit restarts on every selected line
        total = file_patcher.replace_at_line_n(
            tmp_path, None, [LineReplacer("^option_", "off", "on")], 1
        )
        print(f"Per-line limit of 1: {total} replacements")

        with open(tmp_path) as f:
            print(f.read())

    finally:
        os.unlink(tmp_path)


def locked_example():
    """Demonstrate editing while holding a lock on the file."""
    print("\n=== Locked Session Example ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "counter.txt")
        file_patcher.fileio.create(path, b"count=0\n")

        with exclusive_edit(path, timeout=5) as editer:
            editer.replace([Replacer(r"count=\d+", "count=1")])

        with open(path) as f:
            print(f.read().strip())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    session_example()
    one_shot_example()
    locked_example()

    print("\n=== All examples completed successfully! ===")
