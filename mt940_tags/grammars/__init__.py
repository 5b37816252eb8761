"""
Grammar definitions sub-package for mt940-tags.

Contains the YAML file that defines the regular expression and
projection for each supported tag. The loader module (tag_registry.py
in the parent package) reads it at runtime.
"""
