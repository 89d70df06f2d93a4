"""Test package for lobby-reveal."""
