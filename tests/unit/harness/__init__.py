"""Unit tests for the regression pipeline."""
