"""Alertmanager notification adapter for rules-engine alert events."""
