"""Value types, time normalization and errors."""
