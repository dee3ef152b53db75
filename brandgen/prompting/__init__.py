"""Prompting package.

This package contains deterministic prompt-construction helpers used by the core
orchestration layer. It does not perform credential checks, parsing, or model
invocation.
"""
