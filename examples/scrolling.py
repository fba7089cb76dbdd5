"""
Scrolling list example.

Run with: python examples/scrolling.py
"""

from __future__ import annotations

import string

from interphase import ScrollingTransformer, SimpleListView, Window

with Window("Scrolling") as window:
    window.size(200, 200)
    window.add(ScrollingTransformer(SimpleListView(string.ascii_lowercase)))

window.show_all()
raise SystemExit(window.run())
