# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Only the names below are read; everything else comes from the environment.
"""

# Example: plain letters instead of color swatches
# COLOR = False

# Example: save after every change instead of only at exit
# AUTOSAVE = True
