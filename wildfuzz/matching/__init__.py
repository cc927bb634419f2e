"""Core wildcard-aware edit distance, extraction, and scoring."""
