"""Adapters exposing the application to users."""
