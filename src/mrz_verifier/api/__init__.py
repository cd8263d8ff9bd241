"""HTTP service exposing MRZ verification."""
