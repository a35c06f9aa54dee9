"""
Core module - Business logic for skriv

This module contains the core functionality organized by domain:
- i18n: Message catalogs, plural selection and locale fallback
- analysis: Tokenizing, stemming and word-frequency feedback
- feedback: Composes both for the editor's repetition and sentence views
"""
