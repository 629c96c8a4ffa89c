"""Domain layer: records, directory ports and storage exceptions."""
