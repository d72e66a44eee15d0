"""``python -m newpipi`` opens the GUI; ``python -m newpipi --cli ...`` runs the CLI."""

import sys


def main() -> None:
    if len(sys.argv) > 1 and sys.argv[1] == "--cli":
        from newpipi.pipeline import main as cli_main

        cli_main(sys.argv[2:])
        return

    from newpipi.gui.main_window import main as gui_main

    sys.exit(gui_main())


if __name__ == "__main__":
    main()
