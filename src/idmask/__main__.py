# SPDX-License-Identifier: MIT
"""Allow ``python -m idmask``."""

from .cli.main import main

if __name__ == "__main__":
    main()
