"""Diagnostics package (plots).

Needs the diagnostics extras:
  pip install "lunaryear[diagnostics]"
"""

__all__ = ["plot_deltat", "synodic_months"]
