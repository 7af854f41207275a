"""Book building pipeline."""
