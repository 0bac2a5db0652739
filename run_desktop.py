#!/usr/bin/env python
"""Desktop app entrypoint for the roadways ledger."""

import flet as ft

from roadledger.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
