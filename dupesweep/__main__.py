"""
Allow running the package with: python -m dupesweep

By default, launches the GUI. Use 'cli' subcommand for command-line interface.

Examples:
    python -m dupesweep                     # Launch GUI
    python -m dupesweep gui                 # Launch GUI (explicit)
    python -m dupesweep cli                 # Launch CLI (interactive menu)
    python -m dupesweep cli /path/to/photos # CLI with path
    python -m dupesweep config --init       # Create example config file
"""

import sys


def show_config() -> int:
    """Print or create the user configuration file."""
    from .user_config import get_user_config

    config = get_user_config()

    if '--init' in sys.argv or '-i' in sys.argv:
        if config.create_example_config():
            print("Created example configuration file at:")
            print(f"  {config.config_file_path}")
            print("\nEdit this file to customize dupesweep settings.")
            return 0
        print("Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: found")
    else:
        print("Status: not found (using defaults)")
        print("\nRun 'python -m dupesweep config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  default_max_distance: {config.default_max_distance}")
    print(f"  default_workers: {config.default_workers}")
    print(f"  default_extensions: {' '.join(config.default_extensions)}")
    print(f"  duplicates_folder_name: {config.duplicates_folder_name}")
    return 0


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'cli':
        # Remove 'cli' from argv so argparse doesn't see it
        sys.argv.pop(1)
        from .cli import main as cli_main
        sys.exit(cli_main())
    elif len(sys.argv) > 1 and sys.argv[1] == 'gui':
        sys.argv.pop(1)
        from .app import main as gui_main
        gui_main()
    elif len(sys.argv) > 1 and sys.argv[1] == 'config':
        sys.argv.pop(1)
        sys.exit(show_config())
    else:
        # Default to GUI
        from .app import main as gui_main
        gui_main()


if __name__ == '__main__':
    main()
