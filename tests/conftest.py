"""Shared test configuration."""

import os

# Widgets and clipboards need a platform plugin; CI machines have no display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
