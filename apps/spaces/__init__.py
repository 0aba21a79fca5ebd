"""Spaces app package.

This app owns bookable coworking spaces together with their weekly
availability calendar, address and images, and exposes the lifecycle
operations that keep those owned records consistent.
"""
