"""Concrete visitors that render domain objects to text."""
