# scrubbing/engine/__init__.py

"""Engine package providing the fluent scrubber and its pattern cache."""
