"""Core: configuration, fallback selection and data resolution."""
