"""Shiv Shakti Steel Tubes purchase-order backend."""
