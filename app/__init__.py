"""HTTP service exposing the accessibility report normalizer."""
