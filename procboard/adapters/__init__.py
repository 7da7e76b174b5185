"""Adapters implementing domain ports for the editor runtime."""
