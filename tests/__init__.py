"""Test suite for fmcli."""
