"""Core data model, resolver and estimation engine."""
