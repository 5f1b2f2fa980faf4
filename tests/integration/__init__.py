"""Integration tests for the mdlite converter.

These tests run the real CLI against the real filesystem (temporary
directories), covering configuration, conversion and output together.
"""
