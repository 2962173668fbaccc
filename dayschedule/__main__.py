"""
Package entry point.

Allows running the application via:

    python -m dayschedule [input_file]

This simply forwards execution to dayschedule.cli.main().
"""

from dayschedule.cli import main

if __name__ == "__main__":
    main()
