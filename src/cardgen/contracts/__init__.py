"""JSON-schema contracts for card payloads and render requests."""
