"""Run subcommands as: python -m breakwatch <scan|render> [options]."""

import sys


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m breakwatch <scan|render> [options]")
        sys.exit(1)

    name = sys.argv[1]
    # Remove the subcommand so the subcommand's argparse doesn't see it.
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if name == "scan":
        from breakwatch.scanner.runner import main as scan_main
        scan_main()
    elif name == "render":
        from breakwatch.render.dashboard import main as render_main
        render_main()
    else:
        print(f"Unknown command: {name}")
        sys.exit(1)


if __name__ == "__main__":
    main()
