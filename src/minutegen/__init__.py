"""Turn meeting transcripts into templated summaries."""
