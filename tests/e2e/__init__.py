"""End-to-end tests for the regress command.

These tests run the complete pipeline through the command-line entry point:
- Spec parsing and fatal spec errors
- Downloads from a local HTTP server with hash verification
- Command execution, comparison and the failure report
- Exit status equal to the number of failed tests
"""
