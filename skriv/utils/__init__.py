"""
Utils module - Shared utilities for skriv

This module provides common utilities used across the project:
- text_processing: Text cleanup, normalization and word counting
- io_helpers: File I/O with proper encoding
- logging_helper: Consistent logging setup
- config: Settings from YAML and environment
- paths: Common path definitions
"""
