# scrubbing/service/__init__.py

"""Service layer: settings and the declarative recipe pipeline."""
