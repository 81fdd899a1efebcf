"""
hs-order-cli.

Command-line client for a Hearthstone boosting order API: fetches an
order, decodes its packed statistics and changes its play settings.
"""

__version__ = "0.1.0"
