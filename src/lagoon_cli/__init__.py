"""Command-line client for the Lagoon GraphQL API."""

__version__ = "0.1.0"
