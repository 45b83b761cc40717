"""
A_core: Logging, acronym entity model, exceptions and YAML loading.

Core abstractions shared by the registry, the style engine and the ingestion
adapters:
- Centralized logging configuration (A00_logging)
- Pydantic acronym entity with usage counters (A01_acronym_models)
- Structured exception hierarchy (A02_exceptions)
- YAML loading with YAML 1.2 booleans (A03_yaml_loader)
"""
