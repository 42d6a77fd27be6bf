"""HTTP surface for the summarization gateway."""
