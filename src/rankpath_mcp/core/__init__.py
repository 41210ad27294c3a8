"""Core layer — the RankPath API client, its data models and errors.

This module is framework-agnostic. It has no dependency on MCP or any server
framework; the tool adapter and server import from here.
"""
