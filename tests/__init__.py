"""Tests for the osu! api v2 models and decoder."""
