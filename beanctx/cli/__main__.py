"""Allow beanctx to be run as a module.

This enables running the CLI with `python -m beanctx.cli`.
"""

from . import main

if __name__ == "__main__":
    main()
