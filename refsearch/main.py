"""Entry point: refsearch [cli|oneshot QUERY...]."""

import asyncio
import sys

USAGE = "Usage: refsearch [cli|oneshot QUERY...]"


def main():
    args = sys.argv[1:]
    mode = args[0].lower() if args else "cli"

    if mode == "cli":
        from refsearch.interfaces.cli import run_cli

        sys.exit(asyncio.run(run_cli()))

    if mode == "oneshot":
        from refsearch.interfaces.oneshot import main as oneshot_main

        # Query from the remaining arguments, else piped on stdin.
        query = " ".join(args[1:]).strip() or sys.stdin.read().strip()
        sys.exit(oneshot_main(query=query))

    if mode in ("-h", "--help", "help"):
        print(USAGE)
        sys.exit(0)

    print(f"Unknown mode: {mode}")
    print(USAGE)
    sys.exit(1)


if __name__ == "__main__":
    main()
