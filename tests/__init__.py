"""Tests for the alphabetize package."""
