"""
Bundled JSON schema documents.

This package only carries data files; they are read by
cloud_assembly_schema.core.embedded.
"""
