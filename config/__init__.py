"""Configuration for Talent Agent."""
