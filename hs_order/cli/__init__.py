"""
CLI Module.

Typer application and Rich rendering for the order client.

Architecture:
- CLI validates input and renders output
- Network calls go through hs_order.api
- Decoding lives in hs_order.stats
"""
