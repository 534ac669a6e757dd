"""Flet app: onboarding gate and greetings list."""
