"""Folio: authorization and workflow-policy engine for content publishing."""

__version__ = "0.1.0"
