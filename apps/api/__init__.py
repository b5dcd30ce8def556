"""Blueprints API application."""
