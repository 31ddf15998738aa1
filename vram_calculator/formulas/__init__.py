"""Constants and heuristics used by the estimators."""
