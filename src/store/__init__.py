"""Output side of the conversion pipeline.

This package encodes employee records into JSON documents
and writes them to disk without leaving partial files behind.
"""
