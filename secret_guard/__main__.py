# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow running the command line interface with python -m."""

from secret_guard.cli import app

if __name__ == "__main__":
    app()
