"""Thin HTTP surface over the army workspace."""
