"""
Blockfrost workflow node package.

This package exposes the Blockfrost Cardano REST API as a workflow node: a
category/operation table, a dispatcher that turns node parameters into one
Blockfrost call, and the credential and node descriptions consumed by the host.
See DESIGN.md for full details.
"""

__all__ = ["config"]
