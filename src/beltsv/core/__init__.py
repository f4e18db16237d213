"""beltsv core types: models, enums, and exceptions."""
