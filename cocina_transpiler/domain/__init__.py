"""Domain layer for Cocina Transpiler.

This layer contains the Cocina value model, the repository object lifecycle
and the domain errors. It is independent of XML, storage and the CLI.
"""
