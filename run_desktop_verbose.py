#!/usr/bin/env python
"""Desktop app entrypoint with dev mode forced on and DEBUG console logging."""

import logging
import os
import sys

os.environ["ROADLEDGER_DEV_MODE"] = "true"

logging.basicConfig(
    level=logging.DEBUG,
    format="[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)

import flet as ft  # noqa: E402

from roadledger.desktop.app import main  # noqa: E402

if __name__ == "__main__":
    ft.app(target=main)
