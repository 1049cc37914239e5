"""Locale data files (<locale>.yml) loaded by PackageDataLoader."""
