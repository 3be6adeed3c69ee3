"""
Utilities Package
=================

Cell-level parsers, logging and error types shared by the services.
"""
