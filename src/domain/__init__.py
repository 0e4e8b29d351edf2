"""Domain layer: records, ranking rules and text parsers."""
