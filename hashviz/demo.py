"""A short walk through the HashMap operations, printing its internal state."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from hashviz.hashmap import HashMap

_INTRO = (
    "This is the HashMap demo. It uses HashMap as a client",
    "and calls map.debug() to show the internal state of the hash table.",
    "This is a good way to see the linked lists of every bucket.",
)


def demo(stream: Optional[TextIO] = None) -> HashMap:
    """Insert, rehash, erase and edit a small map, printing it after each step.

    Returns the map in its final state.
    """
    out = sys.stdout if stream is None else stream
    table = HashMap(5)
    out.write("Hello from your past and current lecturers!\n")
    anna_cursor, anna_added = table.insert("Anna", 2)
    table.insert("Avery", 3)
    table.insert("Nikhil", 4)
    table.insert("Ethan", 5)
    table.debug(out)
    table.rehash(2)
    table.debug(out)

    if anna_added:
        table.erase_at(anna_cursor)
    ethan = table.find("Ethan")
    ethan.value = 100
    table.debug(out)

    following = ethan.copy().advance()
    if not following.at_end:
        following.value = 200
    table.debug(out)
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo on standard output."""
    parser = argparse.ArgumentParser(
        prog="hashviz-demo",
        description="Show the internal state of a HashMap while it is edited.",
    )
    parser.parse_args(argv)
    print("RUNNING STUDENT MAIN")
    for line in _INTRO:
        print(line)
    print()
    demo(sys.stdout)
    print("SUCCESSFULLY COMPLETED STUDENT MAIN")
    return 0


if __name__ == "__main__":
    sys.exit(main())