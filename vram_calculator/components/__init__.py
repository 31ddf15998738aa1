"""Memory component calculators."""
