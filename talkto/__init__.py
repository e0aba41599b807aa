"""Talkto: find and contact your representatives."""
