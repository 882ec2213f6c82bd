"""Application layer: validators, selection filters and the upload pipeline."""
